import pytest

from stepper.matching.similarity import are_similar, jaccard, keyword_overlap, normalize


def test_normalize_lowercases_and_splits_on_punctuation():
    assert normalize("Verify SMTP Server (port 587)!") == ["verify", "smtp", "server", "port", "587"]


def test_normalize_drops_empty_tokens():
    assert normalize("  --  ...  ") == []
    assert normalize("") == []
    assert normalize(None) == []


def test_normalize_treats_underscore_as_separator():
    assert normalize("reset_smc now") == ["reset", "smc", "now"]


@pytest.mark.parametrize(
    "a, b",
    [
        (["a", "b"], ["b", "c"]),
        (["x"], []),
        (["one", "two", "two"], ["two", "three", "four"]),
    ],
)
def test_jaccard_is_symmetric(a, b):
    assert jaccard(a, b) == jaccard(b, a)


def test_jaccard_values():
    assert jaccard(["a", "b"], ["b", "c"]) == pytest.approx(1 / 3)
    assert jaccard(["a", "a", "b"], ["a", "b"]) == 1.0


def test_jaccard_identity_and_empty():
    assert jaccard(["restart", "router"], ["restart", "router"]) == 1.0
    assert jaccard([], []) == 0.0


def test_are_similar_is_reflexive():
    assert are_similar("Restart the router", "Restart the router")
    assert are_similar("!!!", "!!!")


def test_are_similar_ignores_case_and_punctuation():
    assert are_similar("Check the outbox for stuck emails", "check the OUTBOX, for stuck emails!")


def test_are_similar_threshold_is_strict():
    # 3 shared tokens out of 5 -> exactly 0.6, not similar
    assert not are_similar("a b c", "a b c d e")
    # 4 of 5 -> 0.8
    assert are_similar("a b c d", "a b c d e")


def test_are_similar_custom_threshold():
    assert are_similar("a b c", "a b c d e", threshold=0.5)


def test_keyword_overlap_uses_whole_tokens():
    tokens = normalize("SMTP port wrong")
    assert keyword_overlap(["smtp", "port"], tokens) == 2
    assert keyword_overlap(["SMTP"], tokens) == 1
    assert keyword_overlap(["smtps", "por"], tokens) == 0
    assert keyword_overlap(["smtp"], []) == 0
