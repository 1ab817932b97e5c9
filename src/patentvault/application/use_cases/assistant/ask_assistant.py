"""Ask assistant use case."""

from patentvault.application.authorization import require
from patentvault.application.dto.client_environment import ClientEnvironment
from patentvault.application.ports import AuditLogger, TextGenerator
from patentvault.domain.entities import AuthorizationContext
from patentvault.domain.exceptions import ValidationError
from patentvault.domain.value_objects import PermissionKey


class AskAssistantUseCase:
    """Forward a question to the text generation service."""

    def __init__(self, text_generator: TextGenerator, audit_logger: AuditLogger) -> None:
        self._generator = text_generator
        self._audit = audit_logger

    async def execute(
        self,
        context: AuthorizationContext,
        prompt: str,
        patent_context: str | None = None,
        environment: ClientEnvironment | None = None,
    ) -> str:
        require(context, PermissionKey.AI_CHAT)
        prompt = prompt.strip()
        if not prompt:
            raise ValidationError("Prompt is empty")
        reply = await self._generator.generate(prompt, patent_context)
        await self._audit.log_action(
            context.identity,
            "AI_CHAT",
            details={"prompt_length": len(prompt)},
            environment=environment,
        )
        return reply
