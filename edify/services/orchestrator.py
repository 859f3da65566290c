"""
Learning operations on top of the provider adapter.

chat                -> propagates ClassifiedError, the caller shows it in the conversation
summarize           -> never raises, falls back to canned text
generate_flashcards -> never raises, falls back to a fixed deck
generate_quiz       -> never raises, falls back to a fixed quiz

`loading` and `error` are for display only. They are overwritten at the start
and end of every networked call (last completed call wins), nothing here
serializes overlapping calls.
"""

import logging
from typing import Callable, Iterable, List, Optional, TypeVar, Union

from pydantic import TypeAdapter, ValidationError

from edify.core import config
from edify.core.errors import ArtifactParseError, ClassifiedError, not_configured
from edify.providers.adapter import ProviderAdapter
from edify.schemas.artifacts import Flashcard, FlashcardList, QuizList, QuizQuestion
from edify.schemas.chat import ChatMessage, Role
from edify.schemas.provider import AIConfig
from edify.services import fallbacks
from edify.services.parsing import extract_json_array
from edify.services.prompt import flashcards_prompt, quiz_prompt, summary_prompt

logger = logging.getLogger(__name__)

T = TypeVar("T")
HistoryItem = Union[ChatMessage, dict]


def _user(content: str) -> ChatMessage:
    return ChatMessage(role=Role.USER, content=content)


class GenerationOrchestrator:
    def __init__(
        self,
        ai_config: Optional[AIConfig] = None,
        content: Optional[str] = None,
        *,
        adapter: Optional[ProviderAdapter] = None,
    ) -> None:
        self.config = ai_config or AIConfig()
        self.content = content
        if adapter is None and self.config.is_configured:
            adapter = ProviderAdapter.from_config(self.config)
        self.adapter = adapter
        self.loading = False
        self.error: Optional[ClassifiedError] = None

    @property
    def is_configured(self) -> bool:
        return self.adapter is not None

    async def _call(self, messages: List[ChatMessage], grounding: Optional[str] = None) -> str:
        self.loading = True
        self.error = None
        try:
            return await self.adapter.chat(messages, grounding)
        except ClassifiedError as e:
            self.error = e
            raise
        finally:
            self.loading = False

    async def chat(self, message: str, history: Iterable[HistoryItem] = ()) -> str:
        if not self.is_configured:
            raise not_configured()
        messages = [m if isinstance(m, ChatMessage) else ChatMessage.model_validate(m) for m in history]
        messages.append(_user(message))
        return await self._call(messages, self.content)

    def _source(self, content: Optional[str]) -> str:
        return (self.content or "") if content is None else content

    async def summarize(self, content: Optional[str] = None) -> str:
        source = self._source(content)
        if not self.is_configured or not source:
            return fallbacks.DEMO_SUMMARY
        try:
            return await self._call([_user(summary_prompt(source))])
        except ClassifiedError as e:
            logger.warning("summary generation failed (%s), using fallback", e.kind.value)
            return fallbacks.summary_fallback(e)

    async def generate_flashcards(self, content: Optional[str] = None) -> List[Flashcard]:
        source = self._source(content)
        if not self.is_configured:
            return fallbacks.unconfigured_flashcards()
        if not source:
            return fallbacks.demo_flashcards()
        return await self._generate_list(
            flashcards_prompt(source), FlashcardList, config.FLASHCARD_COUNT,
            fallbacks.fallback_flashcards, "flashcards",
        )

    async def generate_quiz(self, content: Optional[str] = None) -> List[QuizQuestion]:
        source = self._source(content)
        if not self.is_configured:
            return fallbacks.unconfigured_quiz()
        if not source:
            return fallbacks.demo_quiz()
        return await self._generate_list(
            quiz_prompt(source), QuizList, config.QUIZ_COUNT,
            fallbacks.fallback_quiz, "quiz",
        )

    async def _generate_list(
        self,
        prompt: str,
        shape: TypeAdapter,
        limit: int,
        fallback: Callable[[], List[T]],
        what: str,
    ) -> List[T]:
        try:
            raw = await self._call([_user(prompt)])
        except ClassifiedError as e:
            logger.warning("%s generation failed (%s), using fallback", what, e.kind.value)
            return fallback()

        # a reply we can't use is not a provider failure: error state stays clear
        try:
            items = shape.validate_python(extract_json_array(raw))
        except (ArtifactParseError, ValidationError) as e:
            logger.warning("could not parse %s from model output: %s", what, e)
            return fallback()
        if not items:
            logger.warning("model returned an empty %s array", what)
            return fallback()
        return items[:limit]
