import pytest

from models import PolitenessLevel
from services.politeness import ADVICE, PolitenessAnalyzer, count_markers


@pytest.fixture
def analyzer():
    return PolitenessAnalyzer()


@pytest.mark.parametrize("text, level", [
    ("Bonjour madame, vous voulez un café?", PolitenessLevel.FORMAL),
    ("Un café, s'il vous plaît.", PolitenessLevel.FORMAL),
    ("Salut, tu veux un café?", PolitenessLevel.INFORMAL),
    ("Passe-moi le sel, s'il te plaît", PolitenessLevel.MIXED),
    ("Bonjour", PolitenessLevel.MIXED),
    ("Tu viens ou vous venez?", PolitenessLevel.MIXED),
    ("", PolitenessLevel.MIXED),
])
def test_analyze_politeness(analyzer, text, level):
    result = analyzer.analyze_politeness(text)
    assert result.level == level
    assert result.suggestions == [ADVICE[level]]


def test_polite_phrase_does_not_outweigh_tu(analyzer):
    # only "vous" counts in "s'il vous plaît", so it ties with "tu"
    assert analyzer.analyze_politeness("tu veux un café s'il vous plaît").level == PolitenessLevel.MIXED


def test_informal_phrase_adds_no_informal_marker(analyzer):
    assert analyzer.analyze_politeness("vous passez le sel s'il te plaît").level == PolitenessLevel.FORMAL


def test_count_markers_counts_single_tokens_only():
    words = ["un", "café", "s'il", "vous", "plaît"]
    assert count_markers(words, ["vous", "s'il vous plaît"]) == 1
    assert count_markers(words, ["s'il te plaît"]) == 0


def test_count_markers_counts_repeats():
    assert count_markers(["tu", "sais", "tu", "vois"], ["tu"]) == 2
