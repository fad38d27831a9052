from typing import List, Sequence
from models import PolitenessLevel, PolitenessResult
from services.normalizer import normalize

FORMAL_MARKERS = ("vous", "monsieur", "madame", "mademoiselle", "s'il vous plaît", "veuillez")
INFORMAL_MARKERS = ("tu", "s'il te plaît")

ADVICE = {
    PolitenessLevel.FORMAL: "Perfect! You're using formal register appropriately.",
    PolitenessLevel.INFORMAL: "Good use of informal register. Remember to use 'vous' in formal situations.",
    PolitenessLevel.MIXED: "Consider the context: use 'vous' for formal situations, 'tu' for informal ones.",
}

def count_markers(words: List[str], markers: Sequence[str]) -> int:
    """Count tokens that are markers; multi-word markers never equal a single token"""
    return sum(1 for word in words if word in markers)

class PolitenessAnalyzer:
    def __init__(self, formal_markers: Sequence[str] = FORMAL_MARKERS,
                 informal_markers: Sequence[str] = INFORMAL_MARKERS):
        self.formal_markers = tuple(formal_markers)
        self.informal_markers = tuple(informal_markers)

    def analyze_politeness(self, text: str) -> PolitenessResult:
        """Classify the register of an utterance as formal, informal or mixed"""
        words = normalize(text)
        formal_count = count_markers(words, self.formal_markers)
        informal_count = count_markers(words, self.informal_markers)

        if formal_count > informal_count:
            level = PolitenessLevel.FORMAL
        elif informal_count > formal_count:
            level = PolitenessLevel.INFORMAL
        else:
            level = PolitenessLevel.MIXED

        return PolitenessResult(level=level, suggestions=[ADVICE[level]])
