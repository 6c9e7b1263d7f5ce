"""NiceGUI integration for the realty-chat page.

Provides :class:`ChatPage` — a reusable builder that host apps instantiate
once with app-level config, then call ``render()`` per request.

Usage::

    from realty_chat.chat_config import ChatAppConfig
    from realty_chat.chat_page import ChatPage

    chat_page = ChatPage(ChatAppConfig(app_title="Listings Chat"))

    @ui.page("/")
    async def chat_route():
        await chat_page.render()

``app.storage.user`` must be available, i.e. ``ui.run`` needs a
``storage_secret``.
"""

import logging

from nicegui import ui, app

from realty_chat.chat_config import ChatAppConfig
from realty_chat.chat_controller import ChatController
from realty_chat.chat_models import ChatMessage, Sender
from realty_chat.session_identity import SessionIdentifierManager
from realty_chat.storage import KeyValueStore, MappingKeyValueStore
from realty_chat.utils.markdown_renderer import LINK_CLASS, render_answer_html
from realty_chat.webhook_client import WebhookClient

logger = logging.getLogger(__name__)

_PAGE_CSS = f"""
    .chat-shell {{ max-width: 36rem; margin: 0 auto; height: 100vh; }}
    .chat-title {{ color: var(--chat-accent); }}
    .chat-answer p {{ margin: 0 0 0.5em 0; }}
    .chat-answer h1, .chat-answer h2, .chat-answer h3 {{ font-weight: 600; margin: 0.5em 0; }}
    .chat-answer .chat-list {{ padding-left: 1.25rem; margin: 0.25em 0; }}
    .chat-answer .chat-list-disc {{ list-style-type: disc; }}
    .chat-answer .chat-list-decimal {{ list-style-type: decimal; }}
    .chat-answer a.{LINK_CLASS} {{
        display: inline-block; padding: 0.25rem 0.75rem; margin: 0.25rem 0;
        border-radius: 0.5rem; background: var(--chat-accent); color: #fff;
        text-decoration: none; font-weight: 600;
    }}
    .chat-answer a.{LINK_CLASS}:hover {{ background: var(--chat-accent-hover); }}
"""


class NiceGuiChatController(ChatController):
    """ChatController rendering into NiceGUI elements of one page."""

    def __init__(self, *, identity: SessionIdentifierManager, client: WebhookClient):
        super().__init__(identity=identity, client=client)
        self.profile_card: ui.card | None = None
        self.submit_button: ui.button | None = None
        self.chat_column: ui.column | None = None
        self.scroll_area: ui.scroll_area | None = None
        self.messages_column: ui.column | None = None
        self.question_input: ui.input | None = None
        self.send_button: ui.button | None = None

    def _render_message(self, message: ChatMessage) -> None:
        with self.messages_column:
            if message.sender == Sender.VISITOR:
                ui.chat_message(text=message.text, sent=True)
            else:
                ui.chat_message(
                    text=render_answer_html(message.text), sent=False, text_html=True, sanitize=False,
                ).classes("chat-answer")

    def _on_message_added(self, message: ChatMessage) -> None:
        if self.messages_column is None:
            return
        self._render_message(message)
        self.scroll_area.scroll_to(percent=1.0, duration=0.3)

    def _on_pending_changed(self, pending: bool) -> None:
        if self.question_input is None:
            return
        if pending:
            self.question_input.disable()
            self.send_button.disable()
            self.send_button.props("loading")
        else:
            self.question_input.enable()
            self.send_button.enable()
            self.send_button.props(remove="loading")

    def _on_profile_pending_changed(self, pending: bool) -> None:
        if self.submit_button is None:
            return
        if pending:
            self.submit_button.disable()
        else:
            self.submit_button.enable()

    def _on_draft_cleared(self) -> None:
        if self.question_input is not None:
            self.question_input.value = ""

    def _on_notice(self, text: str, kind: str) -> None:
        ui.notify(text, type=kind, position="center", close_button="OK", timeout=0)

    def _on_profile_accepted(self) -> None:
        if self.profile_card is not None:
            self.profile_card.set_visibility(False)
        if self.chat_column is not None:
            self.chat_column.set_visibility(True)


class ChatPage:
    """Builder for rendering the realty-chat page inside NiceGUI."""

    def __init__(self, app_config: ChatAppConfig) -> None:
        self._app_config = app_config

    def _create_store(self) -> KeyValueStore:
        return MappingKeyValueStore(app.storage.user)

    def _create_client(self) -> WebhookClient:
        return WebhookClient(self._app_config.webhook)

    async def render(self) -> NiceGuiChatController:
        """Call from within a ``@ui.page`` handler.

        Creates the controller, builds the profile form and the chat view,
        and wires up cleanup on disconnect.
        """
        ac = self._app_config

        # ── Create controller ────────────────────────────────
        identity = SessionIdentifierManager(self._create_store(), key=ac.storage_key)
        controller = NiceGuiChatController(identity=identity, client=self._create_client())
        session_id = controller.session_id

        # ── Cleanup on disconnect ────────────────────────────
        async def _cleanup():
            logger.info(f"[CHAT] Cleaning up session {session_id}")
            await controller.close()

        ui.context.client.on_disconnect(_cleanup)

        # ── Theme / CSS ──────────────────────────────────────
        theme = ac.theme
        if theme is not None:
            ui.add_css(theme.css_variables())
        ui.add_css(_PAGE_CSS)

        # ── Layout ───────────────────────────────────────────
        with ui.column().classes("chat-shell w-full p-4 no-wrap"):
            ui.label(ac.app_title).classes("chat-title text-3xl font-bold mb-4")

            with ui.card().classes("w-full gap-4").mark("profile-card") as controller.profile_card:
                ui.input(placeholder="Your Name").props("outlined").classes("w-full").mark("name-input") \
                    .bind_value(controller.profile, "name")
                ui.input(placeholder="Email").props("outlined type=email").classes("w-full").mark("email-input") \
                    .bind_value(controller.profile, "email")
                ui.input(placeholder="Phone Number").props("outlined type=tel").classes("w-full").mark("phone-input") \
                    .bind_value(controller.profile, "phone")

                async def _submit() -> None:
                    await controller.submit_profile()

                controller.submit_button = ui.button("Submit", on_click=_submit).mark("submit-button")

            with ui.column().classes("w-full flex-grow no-wrap").mark("chat-column") as controller.chat_column:
                with ui.scroll_area().classes("w-full flex-grow border rounded-xl") as controller.scroll_area:
                    controller.messages_column = ui.column().classes("w-full gap-2")

                async def _send() -> None:
                    await controller.send_question()

                with ui.row().classes("w-full no-wrap items-center"):
                    controller.question_input = ui.input(placeholder=ac.input_placeholder) \
                        .props("outlined").classes("flex-grow").mark("question-input") \
                        .bind_value(controller, "draft") \
                        .on("keydown.enter", _send)
                    controller.send_button = ui.button("Send", on_click=_send).mark("send-button")

            controller.chat_column.set_visibility(False)

        logger.info(f"[CHAT] Page rendered for session {session_id}")
        return controller
