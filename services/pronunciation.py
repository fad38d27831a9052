from typing import List, Optional
from config import Config
from models import MatchResult
from services.phonetics import PhoneticApproximator

def levenshtein_distance(first: str, second: str) -> int:
    """Edit distance with unit insertion, deletion and substitution costs"""
    rows = len(second) + 1
    cols = len(first) + 1
    matrix = [[0] * cols for _ in range(rows)]

    for i in range(cols):
        matrix[0][i] = i
    for j in range(rows):
        matrix[j][0] = j

    for j in range(1, rows):
        for i in range(1, cols):
            indicator = 0 if first[i - 1] == second[j - 1] else 1
            matrix[j][i] = min(
                matrix[j][i - 1] + 1,              # deletion
                matrix[j - 1][i] + 1,              # insertion
                matrix[j - 1][i - 1] + indicator,  # substitution
            )

    return matrix[rows - 1][cols - 1]

def similarity(first: str, second: str) -> float:
    """Normalized similarity in [0, 1]; two empty strings are identical"""
    longest = max(len(first), len(second))
    if longest == 0:
        return 1.0
    return (longest - levenshtein_distance(first, second)) / longest

class PronunciationAnalyzer:
    def __init__(self, approximator: Optional[PhoneticApproximator] = None,
                 threshold: Optional[float] = None):
        self.approximator = approximator or PhoneticApproximator()
        self.threshold = Config.SIMILARITY_THRESHOLD if threshold is None else threshold

    def words_match(self, spoken: str, target: str) -> bool:
        """Exact match, or phonetic keys similar enough"""
        if spoken == target:
            return True

        spoken_key = self.approximator.approximate(spoken)
        target_key = self.approximator.approximate(target)
        return similarity(spoken_key, target_key) > self.threshold

    def score(self, spoken: List[str], target: List[str]) -> MatchResult:
        """Greedy first-match of spoken words against the target phrase.

        Each spoken word claims the leftmost remaining target word it matches,
        so a target word is matched at most once. Spoken words without a match
        are incorrect, and target words never claimed are appended afterwards
        as omissions. This is not an optimal alignment: with repeated words a
        spoken token may claim an earlier target occurrence than a human would.
        """
        if not target:
            return MatchResult(accuracy=0, correct_words=[], incorrect_words=[])

        correct_words = []
        incorrect_words = []
        remaining = list(target)

        for spoken_word in spoken:
            match_index = next(
                (i for i, target_word in enumerate(remaining)
                 if self.words_match(spoken_word, target_word)),
                None,
            )
            if match_index is None:
                incorrect_words.append(spoken_word)
            else:
                correct_words.append(remaining.pop(match_index))

        incorrect_words.extend(remaining)

        # Round half up
        accuracy = (len(correct_words) * 200 + len(target)) // (2 * len(target))

        return MatchResult(
            accuracy=accuracy,
            correct_words=correct_words,
            incorrect_words=incorrect_words,
        )
