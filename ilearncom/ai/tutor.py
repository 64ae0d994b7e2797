"""
TutorChat - Single-turn Q&A with the peer-tutor persona.

Request lifecycle on ChatState:
- begin(): in_flight on, previous response cleared, new generation token
- complete() / fail(): applied only if the token is still current
- in_flight is switched off last in every outcome
"""

import logging
from dataclasses import dataclass
from typing import Optional, Protocol

from ilearncom.schemas import ChatState
from ilearncom.utils import load_prompt

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    def generate_text(self, prompt: str, system_instruction: str) -> Optional[str]: ...


@dataclass
class ChatRequest:
    """An issued question awaiting its reply."""
    token: int
    prompt: str


class TutorChat:
    """Drive one ChatState against a text generator."""

    def __init__(self, state: ChatState, generator: TextGenerator):
        self.state = state
        self.generator = generator
        prompt = load_prompt("tutor_chat", required=("system", "fallbacks"))
        self.system_instruction: str = prompt["system"].strip()
        self.empty_reply: str = prompt["fallbacks"]["empty"]
        self.error_reply: str = prompt["fallbacks"]["error"]

    def set_input(self, text: str):
        if not self.state.in_flight:
            self.state.input_text = text

    def can_ask(self, text: Optional[str] = None) -> bool:
        prompt = self.state.input_text if text is None else text
        return bool(prompt.strip()) and not self.state.in_flight

    def begin(self, text: Optional[str] = None) -> Optional[ChatRequest]:
        """
        Issue a question.

        Args:
            text: Prompt to send; defaults to the current input text

        Returns:
            ChatRequest, or None if the prompt is blank or a request is
            already in flight
        """
        if text is not None:
            self.set_input(text)
        if not self.can_ask():
            return None

        self.state.generation += 1
        self.state.in_flight = True
        self.state.response = ""
        return ChatRequest(token=self.state.generation, prompt=self.state.input_text)

    def _is_current(self, request: ChatRequest) -> bool:
        if request.token != self.state.generation:
            logger.debug(f"Discarding stale chat reply (token {request.token})")
            return False
        return True

    def complete(self, request: ChatRequest, reply: Optional[str]):
        """Store a successful reply and clear the input."""
        if not self._is_current(request):
            return
        self.state.response = reply or self.empty_reply
        self.state.input_text = ""
        self.state.in_flight = False

    def fail(self, request: ChatRequest):
        """Show the apology reply; the input is kept for another try."""
        if not self._is_current(request):
            return
        self.state.response = self.error_reply
        self.state.in_flight = False

    def ask(self, text: Optional[str] = None) -> bool:
        """
        Ask a question and wait for the reply.

        Returns:
            True if a request was issued
        """
        request = self.begin(text)
        if request is None:
            return False

        try:
            reply = self.generator.generate_text(request.prompt, self.system_instruction)
        except Exception as e:
            logger.warning(f"Tutor chat request failed: {e}")
            self.fail(request)
        else:
            self.complete(request, reply)
        return True

    def reset(self):
        """Clear the conversation; replies still in flight are dropped."""
        self.state.generation += 1
        self.state.input_text = ""
        self.state.response = ""
        self.state.in_flight = False
