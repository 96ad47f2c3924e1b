import argparse
import asyncio

from mushroom_bot.config import get_settings
from mushroom_bot.services.telegram_client import TelegramClient
from mushroom_bot.utils.exceptions import TelegramAPIError
from mushroom_bot.utils.logging import setup_logging


async def main(url: str) -> int:
    settings = get_settings()
    setup_logging(settings.log_level)

    if not settings.bot_token:
        print("BOT_TOKEN is not set")
        return 1

    client = TelegramClient(
        bot_token=settings.bot_token,
        api_url=settings.telegram_api_url,
        timeout_seconds=settings.telegram_timeout_seconds,
    )
    print(f"Registering Telegram webhook at {url}...")
    try:
        await client.set_webhook(url, secret_token=settings.telegram_webhook_secret)
    except TelegramAPIError as exc:
        print(f"Webhook registration failed: {exc.description}")
        return 1
    print("Webhook registered.")
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Point the bot's Telegram webhook at a URL.")
    parser.add_argument("url", help="Public URL of the deployed service")
    args = parser.parse_args()
    raise SystemExit(asyncio.run(main(args.url)))
