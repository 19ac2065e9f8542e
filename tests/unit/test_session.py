"""Unit tests for ChatSession state transitions."""

import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
import pytest_check as check

from docqa.agent.config import AgentConfig
from docqa.agent.qa_agent import QAError, QAService
from docqa.chat.session import GREETING, MISSING_DOCUMENT_ERROR, ChatSession
from docqa.models.schemas import ChatMessage, MessageRole, QAResult
from tests.conftest import FakeQAService


class TestSetDocument:
    """Tests for committing a document."""

    def test_starts_transcript_with_greeting(self, fake_qa_service: FakeQAService) -> None:
        session = ChatSession(qa_service=fake_qa_service)

        session.set_document("Some text.")

        check.is_true(session.has_document)
        check.equal(session.document_text, "Some text.")
        check.equal(
            session.messages,
            (ChatMessage(role=MessageRole.ASSISTANT, content=GREETING),),
        )

    async def test_new_document_resets_transcript_and_error(
        self, fake_qa_service: FakeQAService
    ) -> None:
        session = ChatSession(qa_service=fake_qa_service)
        session.set_document("First.")
        await session.ask("Question?")
        session.error = "old error"

        session.set_document("Second.")

        check.equal(len(session.messages), 1)
        check.is_none(session.error)
        check.equal(session.document_text, "Second.")


class TestAsk:
    """Tests for asking questions."""

    async def test_success_appends_user_then_assistant(self, fake_qa_service: FakeQAService) -> None:
        session = ChatSession(qa_service=fake_qa_service)
        session.set_document("Context text.")

        reply = await session.ask("What?")

        check.equal(reply, ChatMessage(role=MessageRole.ASSISTANT, content="A", sources=["s1"]))
        check.equal(
            [(m.role, m.content) for m in session.messages],
            [
                (MessageRole.ASSISTANT, GREETING),
                (MessageRole.USER, "What?"),
                (MessageRole.ASSISTANT, "A"),
            ],
        )
        check.equal(session.messages[-1].sources, ["s1"])
        check.equal(fake_qa_service.calls, [("Context text.", "What?")])
        check.is_false(session.is_loading)
        check.is_none(session.error)

    async def test_missing_document_sets_error_without_calling_gateway(
        self, fake_qa_service: FakeQAService
    ) -> None:
        session = ChatSession(qa_service=fake_qa_service)

        reply = await session.ask("Anything?")

        check.is_none(reply)
        check.equal(session.error, MISSING_DOCUMENT_ERROR)
        check.equal(session.messages, ())
        check.equal(fake_qa_service.calls, [])

    async def test_blank_question_is_ignored(self, fake_qa_service: FakeQAService) -> None:
        session = ChatSession(qa_service=fake_qa_service)
        session.set_document("Context.")

        assert await session.ask("   ") is None
        assert len(session.messages) == 1
        assert fake_qa_service.calls == []

    async def test_failure_sets_banner_and_records_message(self) -> None:
        service = FakeQAService(error=QAError("Failed to get response from AI: boom"))
        session = ChatSession(qa_service=service)
        session.set_document("Context.")

        reply = await session.ask("Why?")

        check.equal(reply.role, MessageRole.ASSISTANT)
        check.equal(
            reply.content,
            "Sorry, I ran into an error. Please try again. "
            "Details: Failed to get response from AI: boom",
        )
        check.is_none(reply.sources)
        check.equal(
            session.error,
            "Sorry, I couldn't get an answer. Failed to get response from AI: boom",
        )
        check.equal(session.messages[-2].content, "Why?")
        check.is_false(session.is_loading)

    async def test_loading_while_awaiting_response(self) -> None:
        release = asyncio.Event()
        observed: list[bool] = []
        session: ChatSession

        class SlowService(FakeQAService):
            async def answer(self, context: str, question: str) -> QAResult:
                observed.append(session.is_loading)
                await release.wait()
                return await super().answer(context, question)

        session = ChatSession(qa_service=SlowService())
        session.set_document("Context.")

        task = asyncio.create_task(session.ask("Q?"))
        await asyncio.sleep(0)
        check.is_true(session.is_loading)
        check.equal(session.messages[-1].content, "Q?")
        check.is_false(session.can_ask)

        release.set()
        await task

        check.equal(observed, [True])
        check.is_false(session.is_loading)
        check.is_true(session.can_ask)

    async def test_second_question_while_pending_is_rejected(self) -> None:
        release = asyncio.Event()

        class SlowService(FakeQAService):
            async def answer(self, context: str, question: str) -> QAResult:
                await release.wait()
                return await super().answer(context, question)

        service = SlowService()
        session = ChatSession(qa_service=service)
        session.set_document("Context.")

        first = asyncio.create_task(session.ask("First?"))
        await asyncio.sleep(0)
        second = await session.ask("Second?")
        release.set()
        await first

        check.is_none(second)
        check.equal(service.calls, [("Context.", "First?")])
        check.equal([m.content for m in session.messages].count("Second?"), 0)

    async def test_on_change_called_for_each_transition(self, fake_qa_service: FakeQAService) -> None:
        on_change = MagicMock()
        session = ChatSession(qa_service=fake_qa_service, on_change=on_change)

        session.set_document("Context.")
        await session.ask("Q?")

        # set_document, user message appended, answer appended
        assert on_change.call_count == 3

    async def test_messages_cannot_be_modified(self, fake_qa_service: FakeQAService) -> None:
        session = ChatSession(qa_service=fake_qa_service)
        session.set_document("Context.")
        await session.ask("Q?")

        with pytest.raises(AttributeError):
            session.messages.append(ChatMessage(role=MessageRole.USER, content="x"))  # type: ignore[attr-defined]
        with pytest.raises(ValueError):
            session.messages[-1].content = "edited"  # type: ignore[misc]


class TestAskWithModelReplies:
    """Model replies flowing through QAService into the transcript."""

    @pytest.fixture
    def service_factory(self):
        def factory(content: str) -> QAService:
            with (
                patch("docqa.agent.qa_agent.OpenAIChat"),
                patch("docqa.agent.qa_agent.Agent") as agent_class,
            ):
                agent_class.return_value.arun = AsyncMock(return_value=MagicMock(content=content))
                return QAService(config=AgentConfig(api_key="sk-test"))

        return factory

    async def test_json_reply(self, service_factory) -> None:
        session = ChatSession(qa_service=service_factory('{"answer":"A","sources":["s1"]}'))
        session.set_document("Context.")

        reply = await session.ask("Q?")

        check.equal(reply.content, "A")
        check.equal(reply.sources, ["s1"])

    async def test_plain_text_reply(self, service_factory) -> None:
        session = ChatSession(qa_service=service_factory("hello"))
        session.set_document("Context.")

        reply = await session.ask("Q?")

        check.equal(reply.content, "hello")
        check.equal(reply.sources, [])

    async def test_reply_missing_sources(self, service_factory) -> None:
        session = ChatSession(qa_service=service_factory('{"answer":"A"}'))
        session.set_document("Context.")

        reply = await session.ask("Q?")

        check.is_in("Invalid response structure", reply.content)
        check.is_true(reply.content.startswith("Sorry, I ran into an error."))
        check.is_in("Invalid response structure", session.error)
