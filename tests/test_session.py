import random

import pytest

from packages.dictionary import create_dictionary
from packages.engine import RejectionReason, Session
from packages.game import FALLBACK_ROOT_WORD, SessionController

DICT = create_dictionary("static", words=["silent", "tiles", "tennis", "enlist", "inlets", "xyz"])


def _listen_controller(used=()):
    c = SessionController(["listen"], DICT, seed=1)
    c.session = Session(root_word="listen", used_words=list(used))
    return c


def test_restart_draws_from_word_list():
    words = ["listen", "silkworm", "keyboard"]
    c = SessionController(words, DICT, seed=42)
    seen = set()
    for _ in range(30):
        c.restart()
        assert c.root_word in words
        assert c.used_words == ()
        seen.add(c.root_word)
    assert len(seen) > 1


def test_restart_is_reproducible_with_seed():
    words = ["listen", "silkworm", "keyboard", "notebook"]
    a = SessionController(words, DICT, seed=7)
    b = SessionController(words, DICT, rng=random.Random(7))
    for _ in range(5):
        assert a.root_word == b.root_word
        a.restart()
        b.restart()


def test_restart_falls_back_on_empty_word_list():
    c = SessionController([], DICT, seed=0)
    assert c.root_word == FALLBACK_ROOT_WORD == "silkworm"
    c.restart()
    assert c.root_word == "silkworm"


def test_restart_clears_used_words():
    c = _listen_controller()
    assert c.submit("silent").accepted
    c.restart()
    assert c.used_words == ()


def test_submit_accepts_and_prepends_normalized_word():
    c = _listen_controller()
    res = c.submit("Silent ")
    assert res.accepted and res.clear_input
    assert c.used_words == ("silent",)
    assert c.submit("TILES").accepted
    assert c.used_words == ("tiles", "silent")


def test_submit_rejection_is_atomic():
    c = _listen_controller(used=["tiles"])
    before = c.used_words
    for raw, reason in [
        ("listen", RejectionReason.SAME_AS_ROOT),
        ("it", RejectionReason.TOO_SHORT),
        ("qqqq", RejectionReason.NOT_RECOGNIZED),
        ("tiles", RejectionReason.ALREADY_USED),
        ("tennis", RejectionReason.NOT_SPELLABLE_FROM_ROOT),
    ]:
        res = c.submit(raw)
        assert res.verdict.reason is reason
        assert res.clear_input is False
        assert c.used_words == before


def test_not_spellable_message_names_root():
    res = _listen_controller().submit("tennis")
    assert res.verdict.title == "Not possible"
    assert res.verdict.message.endswith("letters from listen.")


def test_snapshot_is_a_copy():
    c = _listen_controller()
    c.submit("silent")
    snap = c.snapshot()
    assert snap == {"root_word": "listen", "used_words": ["silent"]}
    snap["used_words"].append("oops")
    assert c.used_words == ("silent",)


def test_used_words_cannot_be_changed_from_outside():
    c = _listen_controller()
    c.submit("silent")
    words = c.used_words
    assert isinstance(words, tuple)
    with pytest.raises(AttributeError):
        words.append("tiles")
    assert c.session.used_words == ["silent"]
