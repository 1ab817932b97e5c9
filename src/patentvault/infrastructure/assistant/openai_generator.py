"""OpenAI-compatible text generator for the assistant."""

from openai import AsyncOpenAI

SYSTEM_PROMPT = (
    "You are an assistant for a patent portfolio team. Answer concisely "
    "and only from the patent details provided when they are relevant."
)


class OpenAITextGenerator:
    """Text generator using an OpenAI-compatible chat completions API."""

    def __init__(
        self,
        base_url: str,
        api_key: str,
        model: str,
    ) -> None:
        self._client = AsyncOpenAI(base_url=base_url, api_key=api_key)
        self._model = model

    async def generate(self, prompt: str, context: str | None = None) -> str:
        """Generate a reply to prompt, optionally grounded on context."""
        messages = [{"role": "system", "content": SYSTEM_PROMPT}]
        if context:
            messages.append({"role": "system", "content": f"Patent details:\n{context}"})
        messages.append({"role": "user", "content": prompt})
        response = await self._client.chat.completions.create(
            model=self._model,
            messages=messages,
        )
        return response.choices[0].message.content or ""
