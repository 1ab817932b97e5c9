"""Notifier that records outgoing mail in the application log.

Mail transport and templating belong to the surrounding deployment; this
adapter stands in where none is configured.
"""

from loguru import logger


class LogNotifier:
    """Logs each notification instead of sending it."""

    async def send(self, recipients: list[str], subject: str, body: str) -> None:
        logger.info(f"Notification to {', '.join(recipients)}: {subject} ({len(body)} chars)")
