import json
import logging

from wordscramble.utils import GameLogger, can_spell, normalize_entry


def test_file_logging_and_stats(tmp_path):
    logger = GameLogger(str(tmp_path / "logs"))
    logger.log_user_action("new_game", "game-1")
    logger.log_game_event("game-1", "word_accepted", word="eat")
    logger.log_error(OSError("boom"), "new_game", "game-1")

    for handler in logger.logger.handlers:
        handler.flush()

    stats = logger.get_log_stats()
    assert stats["total_entries"] == 3
    assert stats["user_actions"] == 1
    assert stats["game_events"] == 1
    assert stats["errors"] == 1


def test_entries_are_json(caplog):
    logger = GameLogger()
    with caplog.at_level(logging.INFO, logger=GameLogger.LOGGER_NAME):
        logger.log_game_event("game-1", "word_rejected", word="eel", outcome="NOT_SPELLABLE")

    entry = json.loads(caplog.records[-1].getMessage())
    assert entry["event_type"] == "GAME_EVENT"
    assert entry["action"] == "word_rejected"
    assert entry["details"] == {"game_id": "game-1", "word": "eel", "outcome": "NOT_SPELLABLE"}


def test_stats_without_file_logging():
    assert GameLogger().get_log_stats() == {"error": "File logging is disabled"}


def test_normalize_entry():
    assert normalize_entry("  SiLk \n") == "silk"
    assert normalize_entry("\t\n") == ""


def test_can_spell_counts_letters():
    assert can_spell("eat", "teacup")
    assert not can_spell("eel", "teacup")
    assert can_spell("", "teacup")
