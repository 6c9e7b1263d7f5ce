"""Base ChatController with the business logic of the visitor chat.

Views (NiceGUI, tests) subclass this and implement the abstract hooks for
view-specific rendering.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from realty_chat.chat_models import ChatMessage, ConversationLog, Sender, VisitorProfile
from realty_chat.session_identity import SessionIdentifierManager
from realty_chat.webhook_client import WebhookClient, WebhookError

logger = logging.getLogger(__name__)

MISSING_FIELDS_NOTICE = "Please fill in all fields."
PROFILE_ACCEPTED_NOTICE = "Thank you! You can now ask your real estate questions."
PROFILE_FAILED_NOTICE = "Failed to save info. Please try again."
FALLBACK_ANSWER = "Sorry, I couldn't understand that."
FAILURE_ANSWER = "❌ Something went wrong while processing your question."


class ChatController(ABC):
    """Base chat controller holding the session, profile and conversation state.

    Subclass and implement abstract hooks for view-specific rendering.
    Remote failures are absorbed here and never reach the view as exceptions.
    """

    def __init__(self, *, identity: SessionIdentifierManager, client: WebhookClient):
        """Initialize controller.

        Args:
            identity: Source of the per-browser session identifier
            client: Webhook client used for both remote calls
        """
        self.identity = identity
        self.client = client

        self.profile = VisitorProfile()
        self.profile_submitted = False
        self.log = ConversationLog()
        self.draft = ""

        self._pending = False
        self._profile_pending = False

    @property
    def session_id(self) -> str:
        return self.identity.session_id

    @property
    def pending(self) -> bool:
        """True while a question is in flight."""
        return self._pending

    @property
    def profile_pending(self) -> bool:
        """True while a profile submission is in flight."""
        return self._profile_pending

    def _set_pending(self, value: bool) -> None:
        self._pending = value
        self._on_pending_changed(value)

    def _append(self, sender: Sender, text: str) -> ChatMessage:
        message = self.log.append(sender, text)
        self._on_message_added(message)
        return message

    # ========== BUSINESS LOGIC (concrete methods) ==========

    async def submit_profile(self, draft: Optional[VisitorProfile] = None) -> bool:
        """Validate and send the visitor profile.

        Args:
            draft: Profile to submit; defaults to ``self.profile``

        Returns:
            True if the profile is accepted (now or earlier)
        """
        if self.profile_submitted:
            return True
        if self._profile_pending:
            logger.debug("[PROFILE] Submission already in flight, ignoring")
            return False

        draft = draft if draft is not None else self.profile
        missing = draft.missing_fields()
        if missing:
            logger.info(f"[PROFILE] Missing fields: {missing}")
            self._on_notice(MISSING_FIELDS_NOTICE, "warning")
            return False

        snapshot = draft.model_copy()
        self._profile_pending = True
        self._on_profile_pending_changed(True)
        try:
            await self.client.submit_profile(snapshot, self.session_id)
        except WebhookError as e:
            logger.warning(f"[PROFILE] Submission failed: {e}")
            self._on_notice(PROFILE_FAILED_NOTICE, "negative")
            return False
        except Exception as e:
            logger.error(f"[PROFILE] Unexpected error: {type(e).__name__}: {e}")
            self._on_notice(PROFILE_FAILED_NOTICE, "negative")
            return False
        finally:
            self._profile_pending = False
            self._on_profile_pending_changed(False)

        self.profile = snapshot
        self.profile_submitted = True
        logger.info(f"[PROFILE] Accepted for session {self.session_id}")
        self._on_notice(PROFILE_ACCEPTED_NOTICE, "positive")
        self._on_profile_accepted()
        return True

    async def send_question(self, text: Optional[str] = None) -> Optional[ChatMessage]:
        """Send a question and append the answer to the log.

        Args:
            text: Question text; defaults to the current input draft

        Returns:
            The appended assistant message, or None if the call was a no-op
        """
        question = (self.draft if text is None else text).strip()
        if not question:
            return None
        if self._pending:
            logger.info("[CHAT] Question already in flight, rejecting new one")
            return None

        self._append(Sender.VISITOR, question)
        self.draft = ""
        self._on_draft_cleared()
        self._set_pending(True)
        try:
            try:
                answer = await self.client.ask(question, self.session_id)
            except WebhookError as e:
                logger.warning(f"[CHAT] Question failed: {e}")
                return self._append(Sender.ASSISTANT, FAILURE_ANSWER)
            except Exception as e:
                logger.error(f"[CHAT] Unexpected error: {type(e).__name__}: {e}")
                return self._append(Sender.ASSISTANT, FAILURE_ANSWER)
            return self._append(Sender.ASSISTANT, answer or FALLBACK_ANSWER)
        finally:
            self._set_pending(False)

    async def close(self) -> None:
        """Release the webhook client."""
        await self.client.close()

    # ========== ABSTRACT HOOKS (subclasses implement) ==========

    @abstractmethod
    def _on_message_added(self, message: ChatMessage) -> None:
        """Called after a message is appended to the log.

        View should render it and scroll to the newest entry.
        """
        pass

    @abstractmethod
    def _on_pending_changed(self, pending: bool) -> None:
        """Called when the Pending-Request flag flips."""
        pass

    @abstractmethod
    def _on_profile_pending_changed(self, pending: bool) -> None:
        """Called when a profile submission starts or ends."""
        pass

    @abstractmethod
    def _on_draft_cleared(self) -> None:
        """Called after the question input draft is cleared."""
        pass

    @abstractmethod
    def _on_notice(self, text: str, kind: str) -> None:
        """Called to show a blocking notice.

        Args:
            text: Notice text
            kind: One of "positive", "negative", "warning"
        """
        pass

    @abstractmethod
    def _on_profile_accepted(self) -> None:
        """Called once when the profile is accepted; view should show the chat."""
        pass
