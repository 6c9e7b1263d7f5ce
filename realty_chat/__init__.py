"""realty-chat — visitor chat widget backed by remote webhooks."""

from realty_chat.chat_models import ChatMessage, ConversationLog, Sender, VisitorProfile
from realty_chat.chat_config import ChatAppConfig, ThemeConfig, WebhookConfig
from realty_chat.chat_controller import ChatController
from realty_chat.session_identity import SessionIdentifierManager
from realty_chat.storage import KeyValueStore, MappingKeyValueStore, MemoryKeyValueStore
from realty_chat.webhook_client import WebhookClient, WebhookError

__all__ = [
    "ChatMessage",
    "ConversationLog",
    "Sender",
    "VisitorProfile",
    "ChatAppConfig",
    "ThemeConfig",
    "WebhookConfig",
    "ChatController",
    "SessionIdentifierManager",
    "KeyValueStore",
    "MappingKeyValueStore",
    "MemoryKeyValueStore",
    "WebhookClient",
    "WebhookError",
    "ChatPage",
]


def __getattr__(name: str):
    if name == "ChatPage":
        from realty_chat.chat_page import ChatPage
        return ChatPage
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
