import pytest

from wordscramble.config import (
    Config, DevelopmentConfig, TestingConfig, config,
    get_word_statistics, validate_word_list_integrity
)


def test_config_mapping():
    assert config['default'] is DevelopmentConfig
    assert config['testing'] is TestingConfig
    assert issubclass(config['production'], Config)


def test_testing_config_disables_file_logging():
    assert TestingConfig.TESTING is True
    assert TestingConfig.LOG_DIR is None


def test_valid_word_list_passes():
    assert validate_word_list_integrity(["teacup", "silkworm"])


@pytest.mark.parametrize("words, problem", [
    ([], "cannot be empty"),
    (["teacup", "cup"], "too short"),
    (["tea-cup"], "non-alphabetic"),
    (["TeaCup"], "lowercase"),
    (["teacup", "silkworm", "teacup"], "Duplicate"),
])
def test_invalid_word_lists_are_reported(words, problem):
    with pytest.raises(ValueError, match=problem):
        validate_word_list_integrity(words)


def test_word_statistics():
    stats = get_word_statistics(["teacup", "silkworm"])
    assert stats["total_words"] == 2
    assert stats["avg_length"] == 7.0
    assert stats["letter_frequency"]["e"] == 1
    assert len(stats["most_common_letters"]) == 5


def test_word_statistics_for_empty_list():
    assert get_word_statistics([]) == {"error": "Word list is empty"}


def test_bundled_word_list_passes_integrity_check():
    from wordscramble.services import WordSource
    candidates = WordSource(Config.WORD_LIST_PATH).load_root_candidates()
    assert validate_word_list_integrity(candidates)
