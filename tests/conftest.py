import random

import pytest

from wordscramble.services import GameService, WordListSpellCheckService, WordSource


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def dictionary():
    return WordListSpellCheckService([
        "silk", "worm", "milk", "work", "skim", "risk",
        "eat", "tea", "cup", "cut", "ate", "tape", "cape", "pace",
    ])


@pytest.fixture
def make_word_list(tmp_path):
    def _make(*words, name="start.txt"):
        path = tmp_path / name
        path.write_text("\n".join(words) + "\n", encoding="utf-8")
        return str(path)
    return _make


@pytest.fixture
def make_game(make_word_list, dictionary, rng):
    """Build a started game whose only root candidate is `root`."""
    def _make(root):
        source = WordSource(make_word_list(root), rng=rng)
        game = GameService(source, dictionary)
        game.start_new_game()
        return game
    return _make
