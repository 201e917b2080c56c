"""Tests for logging helpers."""

import logging

from recommender.utils.logging import LogContext, setup_logging


def test_log_context_prefixes_messages(caplog):
    log = LogContext(logging.getLogger("recommender.test"), user_id="42")

    with caplog.at_level(logging.INFO, logger="recommender.test"):
        log.info("Generated 3 songs")

    assert caplog.messages == ["[user_id=42] Generated 3 songs"]


def test_setup_logging_quiets_noisy_libraries():
    setup_logging("DEBUG")

    for name in ("httpx", "aiosqlite", "sqlalchemy.engine"):
        assert logging.getLogger(name).level == logging.WARNING
