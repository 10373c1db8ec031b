import pytest

from wordscramble.services import PySpellCheckService, SpellCheckService, WordListSpellCheckService


def test_word_list_checker_is_case_insensitive():
    checker = WordListSpellCheckService(["Silk"])
    assert checker.is_valid("silk", "en")
    assert checker.is_valid("SILK", "en")
    assert not checker.is_valid("worm", "en")


def test_word_list_checker_add():
    checker = WordListSpellCheckService()
    assert not checker.is_valid("worm", "en")
    checker.add("worm", "Milk")
    assert checker.is_valid("worm", "en")
    assert checker.is_valid("milk", "en")


def test_empty_word_is_never_valid():
    assert not WordListSpellCheckService([""]).is_valid("", "en")


def test_interface_cannot_be_instantiated():
    with pytest.raises(TypeError):
        SpellCheckService()


def test_subclass_must_implement_is_valid():
    class Incomplete(SpellCheckService):
        pass

    with pytest.raises(TypeError):
        Incomplete()


def test_pyspellchecker_english_dictionary():
    checker = PySpellCheckService()
    assert checker.is_valid("silk", "en")
    assert checker.is_valid("worm", "en")
    assert not checker.is_valid("qzxvj", "en")
    assert not checker.is_valid("", "en")
