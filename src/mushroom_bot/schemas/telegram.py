"""Minimal Telegram webhook schemas."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class TelegramChat(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int


class TelegramPhotoSize(BaseModel):
    model_config = ConfigDict(extra="ignore")

    file_id: str
    width: int = 0
    height: int = 0
    file_size: int | None = None


class TelegramMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message_id: int
    chat: TelegramChat
    text: str | None = None
    photo: list[TelegramPhotoSize] | None = None

    @property
    def has_text(self) -> bool:
        return bool(self.text)

    @property
    def has_photo(self) -> bool:
        return bool(self.photo)

    def largest_photo(self) -> TelegramPhotoSize | None:
        """Return the photo size with the most pixels, preferring later entries on ties."""
        if not self.photo:
            return None
        largest = self.photo[0]
        for size in self.photo[1:]:
            if size.width * size.height >= largest.width * largest.height:
                largest = size
        return largest


class TelegramUpdate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    update_id: int | None = None
    message: TelegramMessage | None = None
