from __future__ import annotations

import io
import logging

from randomness.utils.logging import get_logger, setup_logging


def test_get_logger_namespacing() -> None:
    assert get_logger("dictionary").name == "randomness.dictionary"
    assert get_logger("randomness.dictionary") is get_logger("dictionary")
    assert get_logger().name == "randomness"


def test_setup_logging_is_idempotent() -> None:
    stream = io.StringIO()
    setup_logging("INFO", stream=stream)
    logger = setup_logging("INFO", stream=stream)
    own = [h for h in logger.handlers if getattr(h, "_randomness_handler", False)]
    assert len(own) == 1
    get_logger("test").info("hello")
    assert stream.getvalue().count("hello") == 1
    assert logger.level == logging.INFO


def test_cache_clear_is_logged() -> None:
    from randomness.dictionary import DictionaryRepository

    stream = io.StringIO()
    setup_logging("INFO", stream=stream)
    DictionaryRepository().clear()
    assert "Cleared" in stream.getvalue()
    setup_logging("WARNING")
