import pytest
from packages.dictionary import create_dictionary
from packages.engine import (RejectionReason, Session, describe, is_spellable, letter_counts,
                             normalize, validate)

R = RejectionReason

DICT = create_dictionary("static", words=[
    "silent", "tiles", "tennis", "enlist", "inlets", "lens", "it", "xy", "listen",
    "keep", "eel", "peek",
])


# --- letter consumption (multiset containment) ---
@pytest.mark.parametrize("word,root,expected", [
    ("ee", "keep", True),
    ("ee", "kep", False),
    ("eee", "keep", False),
    ("silent", "listen", True),
    ("tennis", "listen", False),   # needs two n's
    ("", "listen", True),
    ("lens", "listen", True),
    ("lenz", "listen", False),
])
def test_is_spellable(word, root, expected):
    assert is_spellable(word, root) is expected


def test_letter_counts_keeps_first_appearance_order():
    assert letter_counts("keep") == {"k": 1, "e": 2, "p": 1}


def test_normalize():
    assert normalize("  SiLeNt \n") == "silent"
    assert normalize("   ") == ""


# --- rule table for root "listen" ---
@pytest.mark.parametrize("raw,used,expected", [
    ("Silent ", [], None),
    ("listen", [], R.SAME_AS_ROOT),
    ("  LISTEN ", [], R.SAME_AS_ROOT),
    ("it", [], R.TOO_SHORT),
    ("", [], R.TOO_SHORT),
    ("   ", [], R.TOO_SHORT),
    ("xyz", [], R.NOT_RECOGNIZED),
    ("tiles", ["tiles"], R.ALREADY_USED),
    ("TILES", ["tiles"], R.ALREADY_USED),
    ("tennis", [], R.NOT_SPELLABLE_FROM_ROOT),
])
def test_validate_listen(raw, used, expected):
    s = Session(root_word="listen", used_words=list(used))
    v = validate(raw, s, DICT)
    assert v.reason is expected
    assert v.accepted is (expected is None)


def test_validate_priority_order():
    s = Session(root_word="listen", used_words=["tennis"])
    # too short AND unrecognized AND unspellable -> too short wins
    assert validate("zq", s, DICT).reason is R.TOO_SHORT
    # "xy" is a known word but still too short
    assert validate("xy", s, DICT).reason is R.TOO_SHORT
    # used AND unspellable -> already used wins
    assert validate("tennis", s, DICT).reason is R.ALREADY_USED
    # unrecognized AND unspellable -> not recognized wins
    assert validate("zzzz", s, DICT).reason is R.NOT_RECOGNIZED


def test_validate_compares_against_normalized_root():
    s = Session(root_word=" Listen ")
    assert validate("listen", s, DICT).reason is R.SAME_AS_ROOT
    assert validate("silent", s, DICT).accepted


def test_validate_does_not_mutate_session():
    s = Session(root_word="listen", used_words=["tiles"])
    validate("silent", s, DICT)
    validate("xyz", s, DICT)
    assert s.used_words == ["tiles"]


def test_validate_returns_normalized_word():
    v = validate("  EnLiSt ", Session(root_word="listen"), DICT)
    assert v.accepted and v.word == "enlist"


def test_rejection_messages():
    s = Session(root_word="listen")
    v = validate("tennis", s, DICT)
    assert v.title == "Not possible"
    assert v.message == "You can't spell that word with the letters from listen."
    assert describe(R.SAME_AS_ROOT, "listen") == (
        "Nice try!",
        "The purpose of the game is to create different words with the letters of the one proposed.",
    )
    assert describe(R.TOO_SHORT, "x") == ("Too short", "Words must contain at least 3 letters.")
    assert describe(R.NOT_RECOGNIZED, "x") == (
        "Not recognized", "You can't just make up new words, please refer to dictionaries.")
    assert describe(R.ALREADY_USED, "x") == (
        "Already used", "You already added this word, try another one!")


def test_accepted_verdict_has_no_message():
    v = validate("silent", Session(root_word="listen"), DICT)
    assert v.reason is None and v.title == "" and v.message == ""
