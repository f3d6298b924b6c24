import importlib
import json
import logging
import os
from datetime import datetime, timedelta

game_logger_module = importlib.import_module("word_learner.utils.game_logger")
from word_learner.utils.game_logger import game_logger


class _Tomorrow(datetime):
    @classmethod
    def now(cls, tz=None):
        return datetime.now(tz) + timedelta(days=1)


def _file_handler():
    return next(handler for handler in game_logger.logger.handlers
                if isinstance(handler, logging.FileHandler))


def test_stats_follow_the_open_log_file(monkeypatch):
    game_logger.log_game_event("game-1", "game_won", "127.0.0.1", attempts=3)
    assert _file_handler().baseFilename == os.path.abspath(game_logger.log_file)

    # the handler keeps its file past midnight, and so do the stats
    monkeypatch.setattr(game_logger_module, "datetime", _Tomorrow)
    game_logger.log_game_event("game-1", "game_deleted", "127.0.0.1")
    _file_handler().flush()

    stats = game_logger.get_log_stats()
    assert stats["log_file"] == str(game_logger.log_file)
    assert stats["game_events"] >= 2


def test_responses_never_log_the_answer():
    sanitized = game_logger._sanitize_response_data({
        "success": True,
        "state": {"status": "LOST", "answer": "CRANE", "game_over": True},
        "reveal": [{"at_ms": 0}],
    })
    assert "CRANE" not in json.dumps(sanitized)
    assert sanitized["state"]["answer_revealed"] is True
    assert "reveal" not in sanitized
