"""Unit tests for webhook decoding and validation."""
from __future__ import annotations

import json

import pytest

from mushroom_bot.schemas.telegram import TelegramUpdate
from mushroom_bot.services.webhook import decode_update, validate_update
from mushroom_bot.utils.exceptions import DecodeError, ValidationError


@pytest.mark.unit
def test_decode_text_update(text_update) -> None:
    update = decode_update(json.dumps(text_update).encode())
    assert update.message is not None
    assert update.message.chat.id == 42
    assert update.message.text == "hello"


@pytest.mark.unit
def test_decode_ignores_unknown_fields(text_update) -> None:
    text_update["edited_message"] = {"whatever": True}
    text_update["message"]["entities"] = [{"type": "bold", "offset": 0, "length": 5}]
    update = decode_update(json.dumps(text_update).encode())
    assert update.message.text == "hello"


@pytest.mark.unit
def test_decode_empty_object() -> None:
    update = decode_update(b"{}")
    assert update.message is None


@pytest.mark.unit
@pytest.mark.parametrize(
    "body",
    [
        b"",
        b"not json",
        b"[1, 2, 3]",
        b'"a string"',
        b'{"message": "oops"}',
        b'{"message": {"message_id": 1}}',
        b'{"message": {"message_id": 1, "chat": {"id": "abc"}}}',
        b'{"message": {"message_id": 1, "chat": {"id": 1}, "photo": [{"width": 1}]}}',
    ],
)
def test_decode_rejects_malformed_body(body: bytes) -> None:
    with pytest.raises(DecodeError):
        decode_update(body)


@pytest.mark.unit
def test_validate_passes_text(text_update) -> None:
    update = TelegramUpdate.model_validate(text_update)
    assert validate_update(update) is update


@pytest.mark.unit
def test_validate_passes_photo(photo_update) -> None:
    update = TelegramUpdate.model_validate(photo_update)
    assert validate_update(update) is update


@pytest.mark.unit
def test_validate_no_message() -> None:
    with pytest.raises(ValidationError, match="no message"):
        validate_update(TelegramUpdate(update_id=1))


@pytest.mark.unit
def test_validate_no_text_or_photo() -> None:
    update = TelegramUpdate.model_validate(
        {"message": {"message_id": 1, "chat": {"id": 1}, "sticker": {"file_id": "x"}}}
    )
    with pytest.raises(ValidationError, match="no text or photo"):
        validate_update(update)


@pytest.mark.unit
def test_validate_empty_text_and_photo_list() -> None:
    update = TelegramUpdate.model_validate(
        {"message": {"message_id": 1, "chat": {"id": 1}, "text": "", "photo": []}}
    )
    with pytest.raises(ValidationError):
        validate_update(update)
