"""Notifier port - outbound notification email."""

from typing import Protocol


class Notifier(Protocol):
    """Port for sending notifications to a list of recipients."""

    async def send(self, recipients: list[str], subject: str, body: str) -> None: ...
