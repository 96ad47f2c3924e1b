"""Unit tests for structlog setup."""
from __future__ import annotations

import pytest
import structlog

from mushroom_bot.utils.logging import setup_logging


@pytest.mark.unit
def test_module_loggers_render_key_value_lines(capsys) -> None:
    setup_logging("INFO")

    structlog.get_logger("mushroom_bot.services.bot_service").info(
        "photo_with_mushrooms", chat_id=42
    )

    out = capsys.readouterr().out
    assert "event='photo_with_mushrooms'" in out
    assert "logger='mushroom_bot.services.bot_service'" in out
    assert "chat_id=42" in out


@pytest.mark.unit
def test_level_filters_lower_events(capsys) -> None:
    setup_logging("WARNING")

    structlog.get_logger("mushroom_bot.main").info("application_startup")

    assert "application_startup" not in capsys.readouterr().out
