# per-resource state owned by the caller side:
# - chat transcript (starts with a greeting from the assistant)
# - lazily generated summary / flashcards / quiz, one generation per tab until retry()

from __future__ import annotations
import logging
from enum import Enum
from typing import Dict, List, Optional, Set

from edify.core.errors import ClassifiedError
from edify.schemas.chat import ChatMessage, Role
from edify.schemas.provider import AIConfig
from edify.services.extraction import extract_content
from edify.services.orchestrator import GenerationOrchestrator

logger = logging.getLogger(__name__)

GREETING = (
    "Hello! I've analyzed your content and I'm ready to help you learn. "
    "What would you like to know?"
)


class Tab(str, Enum):
    CHAT = "chat"
    SUMMARY = "summary"
    FLASHCARDS = "flashcards"
    QUIZ = "quiz"


class ResourceSession:
    def __init__(
        self,
        name: str,
        ai_config: Optional[AIConfig] = None,
        *,
        content: Optional[str] = None,
        orchestrator: Optional[GenerationOrchestrator] = None,
    ) -> None:
        self.name = name
        self.content = content if content is not None else extract_content(name)
        self.orchestrator = orchestrator or GenerationOrchestrator(ai_config, self.content)
        self.transcript: List[ChatMessage] = [ChatMessage(role=Role.ASSISTANT, content=GREETING)]
        self._artifacts: Dict[Tab, object] = {}
        self._loaded: Set[Tab] = set()

    @property
    def loading(self) -> bool:
        return self.orchestrator.loading

    @property
    def error(self) -> Optional[ClassifiedError]:
        return self.orchestrator.error

    @property
    def needs_reconfigure(self) -> bool:
        return self.error is not None and self.error.needs_reconfigure

    def is_loaded(self, tab: Tab) -> bool:
        return Tab(tab) in self._loaded

    async def send(self, message: str) -> Optional[ChatMessage]:
        text = (message or "").strip()
        if not text:
            return None
        history = list(self.transcript)
        self.transcript.append(ChatMessage(role=Role.USER, content=text))
        try:
            reply = await self.orchestrator.chat(text, history)
        except ClassifiedError as e:
            # errors are shown inline, the conversation itself is kept
            reply = f"{e.message}. {e.suggestion}"
        answer = ChatMessage(role=Role.ASSISTANT, content=reply)
        self.transcript.append(answer)
        return answer

    async def open_tab(self, tab: Tab) -> object:
        """Return the tab's artifact, generating it on first open."""
        tab = Tab(tab)
        if tab is Tab.CHAT:
            return self.transcript
        if tab in self._loaded:
            return self._artifacts.get(tab)
        # marked before generating so a second open doesn't start another call
        self._loaded.add(tab)
        logger.info("loading %s for %s", tab.value, self.name)
        if tab is Tab.SUMMARY:
            result: object = await self.orchestrator.summarize()
        elif tab is Tab.FLASHCARDS:
            result = await self.orchestrator.generate_flashcards()
        else:
            result = await self.orchestrator.generate_quiz()
        self._artifacts[tab] = result
        return result

    def retry(self, tab: Tab) -> None:
        tab = Tab(tab)
        self._loaded.discard(tab)
        self._artifacts.pop(tab, None)
