import re
from typing import Sequence, Tuple

# Applied top to bottom, each rule on the output of the previous one
FRENCH_PHONETIC_RULES: Tuple[Tuple[re.Pattern, str], ...] = (
    (re.compile(r"e$"), ""),       # silent e
    (re.compile(r"s$"), ""),       # silent s
    (re.compile(r"t$"), ""),       # silent t
    (re.compile(r"qu"), "k"),
    (re.compile(r"ch"), "sh"),
    (re.compile(r"j"), "zh"),
    (re.compile(r"gn"), "ny"),
    (re.compile(r"ç"), "s"),
    (re.compile(r"[éèêë]"), "e"),
    (re.compile(r"[àâä]"), "a"),
    (re.compile(r"[ôö]"), "o"),
    (re.compile(r"[ùûü]"), "u"),
)

class PhoneticApproximator:
    def __init__(self, rules: Sequence[Tuple[re.Pattern, str]] = FRENCH_PHONETIC_RULES):
        self.rules = tuple(rules)

    def approximate(self, word: str) -> str:
        """Map a word to a coarse phonetic key"""
        for pattern, replacement in self.rules:
            word = pattern.sub(replacement, word)
        return word
