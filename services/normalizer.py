import re
import unicodedata
from typing import List

PUNCTUATION_PATTERN = re.compile(r"[.,!?;]")
WHITESPACE_PATTERN = re.compile(r"\s+")

def clean_transcript(text: str) -> str:
    """Lowercase, drop punctuation and collapse whitespace"""
    # compose accents so "é" is one character whatever the transcriber sent
    text = unicodedata.normalize("NFC", text)
    text = PUNCTUATION_PATTERN.sub("", text.lower())
    return WHITESPACE_PATTERN.sub(" ", text).strip()

def normalize(text: str) -> List[str]:
    """Split text into normalized word tokens"""
    return [word for word in clean_transcript(text).split(" ") if word]
