"""Text generator port - AI assistant backend."""

from typing import Protocol


class TextGenerator(Protocol):
    """Port for generating assistant replies."""

    async def generate(self, prompt: str, context: str | None = None) -> str: ...
