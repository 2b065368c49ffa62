"""Remote text generation: one call per request, success or a single error type.

``RemoteWorkoutGenerator.generate`` either returns non-blank text or raises
``RemoteGenerationError`` whose ``reason`` names the failure category
(authentication, rate limit, network connection, timeout) when the SDK
exception identifies one. Callers decide whether to fall back or report.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.prompts import ChatPromptTemplate

from fitcoach.chains.workout_chain import HEALTH_CHECK_PROMPT, build_text_chain
from fitcoach.config import Settings

from .dedalus_chat_model import DedalusChatModel

logger = logging.getLogger(__name__)

# SDK exception class name -> reason prefix. Matched against the whole MRO so
# subclasses (e.g. APITimeoutError under APIConnectionError) resolve first.
_FAILURE_REASONS: tuple[tuple[str, str], ...] = (
    ("AuthenticationError", "authentication failed"),
    ("PermissionDeniedError", "authentication failed"),
    ("RateLimitError", "rate limit exceeded"),
    ("APITimeoutError", "request timeout"),
    ("TimeoutError", "request timeout"),
    ("TimeoutException", "request timeout"),
    ("APIConnectionError", "network connection error"),
    ("ConnectError", "network connection error"),
    ("ConnectionError", "network connection error"),
)


class RemoteGenerationError(Exception):
    """The remote generator could not produce usable text."""

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


def describe_failure(exc: BaseException) -> str:
    names = [cls.__name__ for cls in type(exc).__mro__]
    for class_name, reason in _FAILURE_REASONS:
        if class_name in names:
            detail = str(exc)
            return f"{reason}: {detail}" if detail else reason
    return f"{type(exc).__name__}: {exc}"


class RemoteWorkoutGenerator:
    """The AI collaborator consumed by the orchestrator."""

    def __init__(self, settings: Settings, llm: BaseChatModel | None = None) -> None:
        self._settings = settings
        self._llm = llm

    @property
    def llm(self) -> BaseChatModel:
        if self._llm is None:
            self._llm = DedalusChatModel(
                model_name=self._settings.model,
                api_key=self._settings.api_key or None,
                temperature=self._settings.temperature,
                max_tokens=self._settings.max_tokens,
            )
        return self._llm

    def is_configured(self) -> bool:
        has_api_key = bool(self._settings.api_key.strip())
        configured = has_api_key and bool(self._settings.model.strip())
        logger.debug("Remote generator configured: %s (API key available: %s)", configured, has_api_key)
        return configured

    async def generate(self, prompt: ChatPromptTemplate, variables: dict[str, Any]) -> str:
        """Run ``prompt`` through the model and return the stripped reply.

        Raises:
            RemoteGenerationError: On any failure, including a blank reply.
        """
        chain = build_text_chain(prompt, self.llm)
        try:
            content = await asyncio.wait_for(
                chain.ainvoke(variables), timeout=self._settings.request_timeout
            )
        except Exception as e:
            reason = describe_failure(e)
            logger.warning("Remote generation failed: %s", reason)
            raise RemoteGenerationError(reason) from e

        if not content or not content.strip():
            raise RemoteGenerationError("API returned blank content")
        if len(content) < 100:
            logger.warning("Short response received (%d chars)", len(content))
        logger.info("Remote generation succeeded (%d chars)", len(content))
        return content.strip()

    async def health_check(self) -> bool:
        try:
            reply = await self.generate(HEALTH_CHECK_PROMPT, {})
        except RemoteGenerationError as e:
            logger.warning("API health check failed: %s", e.reason)
            return False
        healthy = "api_healthy" in reply.lower()
        logger.info("API health check %s", "passed" if healthy else "failed")
        return healthy
