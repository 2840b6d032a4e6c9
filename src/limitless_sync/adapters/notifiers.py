"""Notification adapters - console, log and Telegram."""

import asyncio
import logging

import click
from telegram import Bot

logger = logging.getLogger(__name__)

TELEGRAM_MESSAGE_LIMIT = 4000


class LogNotifier:
    """Implements Notifier protocol by logging at INFO."""

    def notify(self, message: str) -> None:
        logger.info(message)


class ConsoleNotifier:
    """Implements Notifier protocol by echoing to stderr."""

    def notify(self, message: str) -> None:
        click.echo(message, err=True)


class TelegramNotifier:
    """
    Sends notifications to Telegram chats.

    Implements Notifier protocol. Delivery failures are logged and
    dropped, a notification never interrupts a sync.
    """

    def __init__(self, bot_token: str, chat_ids: list[int]):
        self.bot_token = bot_token
        self.chat_ids = chat_ids

    async def _send(self, message: str) -> None:
        async with Bot(self.bot_token) as bot:
            for chat_id in self.chat_ids:
                try:
                    await bot.send_message(chat_id=chat_id, text=message[:TELEGRAM_MESSAGE_LIMIT])
                except Exception as e:
                    logger.error(f"Failed to send notification to chat {chat_id}: {e}")

    def notify(self, message: str) -> None:
        if not self.chat_ids:
            return
        try:
            asyncio.run(self._send(message))
        except Exception as e:
            logger.error(f"Telegram notification failed: {e}")


class CompositeNotifier:
    """Fans a notification out to several notifiers."""

    def __init__(self, notifiers: list):
        self._notifiers = notifiers

    def notify(self, message: str) -> None:
        for notifier in self._notifiers:
            notifier.notify(message)
