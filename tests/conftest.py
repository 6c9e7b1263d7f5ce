"""Test configuration and fixtures."""
import asyncio
from typing import List, Optional, Tuple

import pytest

from realty_chat.chat_controller import ChatController
from realty_chat.chat_models import ChatMessage, VisitorProfile
from realty_chat.session_identity import SessionIdentifierManager
from realty_chat.storage import MemoryKeyValueStore
from realty_chat.webhook_client import WebhookError


class FakeWebhookClient:
    """Stands in for WebhookClient and records every call."""

    def __init__(self):
        self.profile_calls: List[Tuple[VisitorProfile, str]] = []
        self.question_calls: List[Tuple[str, str]] = []
        self.profile_error: Optional[Exception] = None
        self.answer: Optional[str] = None
        self.ask_error: Optional[Exception] = None
        self.gate: Optional[asyncio.Event] = None
        self.pending_seen: List[bool] = []
        self.controller: Optional[ChatController] = None
        self.closed = False

    async def submit_profile(self, profile: VisitorProfile, session_id: str) -> None:
        self.profile_calls.append((profile, session_id))
        if self.profile_error:
            raise self.profile_error

    async def ask(self, question: str, session_id: str) -> Optional[str]:
        self.question_calls.append((question, session_id))
        if self.controller is not None:
            self.pending_seen.append(self.controller.pending)
        if self.gate is not None:
            await self.gate.wait()
        if self.ask_error:
            raise self.ask_error
        return self.answer

    async def close(self) -> None:
        self.closed = True


class RecordingChatController(ChatController):
    """ChatController that records hook calls instead of rendering."""

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self.rendered: List[ChatMessage] = []
        self.pending_changes: List[bool] = []
        self.profile_pending_changes: List[bool] = []
        self.notices: List[Tuple[str, str]] = []
        self.drafts_cleared = 0
        self.accepted_calls = 0

    def _on_message_added(self, message: ChatMessage) -> None:
        self.rendered.append(message)

    def _on_pending_changed(self, pending: bool) -> None:
        self.pending_changes.append(pending)

    def _on_profile_pending_changed(self, pending: bool) -> None:
        self.profile_pending_changes.append(pending)

    def _on_draft_cleared(self) -> None:
        self.drafts_cleared += 1

    def _on_notice(self, text: str, kind: str) -> None:
        self.notices.append((text, kind))

    def _on_profile_accepted(self) -> None:
        self.accepted_calls += 1


@pytest.fixture
def store():
    return MemoryKeyValueStore()


@pytest.fixture
def client():
    return FakeWebhookClient()


@pytest.fixture
def controller(store, client):
    ctrl = RecordingChatController(identity=SessionIdentifierManager(store), client=client)
    client.controller = ctrl
    return ctrl


@pytest.fixture
def network_error():
    return WebhookError("Webhook failed: ClientConnectorError: connection refused")
