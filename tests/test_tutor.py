"""Tutor chat session tests."""

import pytest

from ilearncom.ai import TutorChat
from ilearncom.schemas import ChatState

from conftest import FakeTextGenerator


@pytest.fixture
def chat(text_generator) -> TutorChat:
    return TutorChat(ChatState(), text_generator)


class TestAsk:

    def test_success_stores_reply_and_clears_input(self, chat, text_generator):
        assert chat.ask("What is RAM?")
        assert chat.state.response == "Sure thing, buddy!"
        assert chat.state.input_text == ""
        assert not chat.state.in_flight
        prompt, system = text_generator.calls[0]
        assert prompt == "What is RAM?"
        assert "classmate" in system

    def test_uses_current_input_when_no_text_given(self, chat, text_generator):
        chat.set_input("What is a CPU?")
        assert chat.ask()
        assert text_generator.calls[0][0] == "What is a CPU?"

    def test_failure_keeps_input_and_apologises(self, failing_text_generator):
        chat = TutorChat(ChatState(), failing_text_generator)
        chat.ask("What is DNS?")
        assert chat.state.input_text == "What is DNS?"
        assert chat.state.response == chat.error_reply
        assert not chat.state.in_flight

    def test_unexpected_error_still_recovers(self):
        chat = TutorChat(ChatState(), FakeTextGenerator(error=ConnectionError("reset")))
        chat.ask("hello")
        assert chat.state.response == chat.error_reply
        assert not chat.state.in_flight

    @pytest.mark.parametrize("reply", [None, ""])
    def test_empty_reply_uses_fallback(self, reply):
        chat = TutorChat(ChatState(), FakeTextGenerator(reply=reply))
        chat.ask("hello")
        assert chat.state.response == chat.empty_reply
        assert chat.state.input_text == ""

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_prompt_is_noop(self, chat, text_generator, text):
        chat.state.response = "previous"
        assert not chat.ask(text)
        assert text_generator.calls == []
        assert chat.state.response == "previous"


class TestRequestLifecycle:

    def test_begin_clears_previous_reply(self, chat):
        chat.state.response = "old answer"
        request = chat.begin("new question")
        assert request is not None
        assert chat.state.in_flight
        assert chat.state.response == ""

    def test_no_second_request_while_in_flight(self, chat):
        first = chat.begin("one")
        assert chat.begin("two") is None
        assert chat.state.input_text == "one"
        chat.complete(first, "answer one")
        assert chat.begin("two") is not None

    def test_stale_reply_is_discarded_after_reset(self, chat):
        request = chat.begin("slow question")
        chat.reset()
        chat.complete(request, "late answer")
        assert chat.state.response == ""
        assert not chat.state.in_flight

    def test_stale_failure_is_discarded(self, chat):
        request = chat.begin("slow question")
        chat.reset()
        chat.set_input("new draft")
        chat.fail(request)
        assert chat.state.response == ""
        assert chat.state.input_text == "new draft"

    def test_session_delegates(self, session, text_generator):
        session.set_chat_input("Why is the sky blue?")
        assert session.ask_tutor()
        assert session.state.chat.response == text_generator.reply
        session.reset_chat()
        assert session.state.chat.response == ""
