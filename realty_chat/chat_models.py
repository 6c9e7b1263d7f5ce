"""Models for the visitor chat."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Sender(str, Enum):
    """Author of a message in the conversation log."""
    VISITOR = "visitor"
    ASSISTANT = "assistant"


class ChatMessage(BaseModel):
    """A single message in the conversation log."""
    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class VisitorProfile(BaseModel):
    """Contact details collected before the chat is enabled."""
    name: str = ""
    email: str = ""
    phone: str = ""

    def missing_fields(self) -> List[str]:
        """Names of the fields that are empty after trimming."""
        return [
            field_name for field_name in ("name", "email", "phone")
            if not getattr(self, field_name).strip()
        ]

    def is_complete(self) -> bool:
        return not self.missing_fields()


class ConversationLog(BaseModel):
    """Append-only, ordered history of exchanged messages."""
    messages: List[ChatMessage] = Field(default_factory=list)

    def append(self, sender: Sender, text: str) -> ChatMessage:
        """Append a message and return it."""
        message = ChatMessage(sender=sender, text=text)
        self.messages.append(message)
        return message

    def get_messages(self) -> List[ChatMessage]:
        """Get a snapshot of all messages in display order."""
        return list(self.messages)

    def get_last_message(self) -> Optional[ChatMessage]:
        """Get the newest message."""
        return self.messages[-1] if self.messages else None

    def __len__(self) -> int:
        return len(self.messages)
