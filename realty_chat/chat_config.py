"""Pydantic config models for the realty-chat page.

WebhookConfig — the two remote endpoints and the request timeout.
ChatAppConfig — app-level settings shared across all visitors.
ThemeConfig — pre-computed CSS accent variables.
"""

import os
import re

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_PROFILE_URL = "https://aiginno-agentic.onrender.com/webhook-test/user"
DEFAULT_QUESTION_URL = "https://aiginno-agentic.onrender.com/webhook-test/ai-chat"

_HEX_COLOR_RE = re.compile(r"^#?[0-9a-fA-F]{6}$")


class ThemeConfig(BaseModel):
    """Pre-computed CSS accent variables applied to the page."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    accent: str
    accent_rgb: str
    accent_hover: str
    accent_light: str

    @classmethod
    def from_hex(cls, hex_color: str) -> "ThemeConfig":
        """Compute all CSS accent values from a single hex color."""
        if not _HEX_COLOR_RE.match(hex_color):
            raise ValueError(f"Invalid accent color: {hex_color!r}")
        h = hex_color.lstrip("#")
        r, g, b = int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)
        hr = max(0, int(r * 0.75))
        hg = max(0, int(g * 0.75))
        hb = max(0, int(b * 0.75))
        return cls(
            accent=f"#{h}",
            accent_rgb=f"{r}, {g}, {b}",
            accent_hover=f"#{hr:02x}{hg:02x}{hb:02x}",
            accent_light=f"rgba({r}, {g}, {b}, 0.12)",
        )

    def css_variables(self) -> str:
        """Render the theme as a ``:root`` CSS block."""
        return (
            ":root {"
            f" --chat-accent: {self.accent};"
            f" --chat-accent-rgb: {self.accent_rgb};"
            f" --chat-accent-hover: {self.accent_hover};"
            f" --chat-accent-light: {self.accent_light};"
            " }"
        )


class WebhookConfig(BaseModel):
    """Remote endpoints the chat talks to."""
    profile_url: str = DEFAULT_PROFILE_URL
    question_url: str = DEFAULT_QUESTION_URL
    request_timeout: float = Field(default=60.0, gt=0)
    """Total seconds allowed per request before it counts as a network failure."""

    @field_validator("profile_url", "question_url")
    @classmethod
    def _check_http_url(cls, value: str) -> str:
        if not value.startswith(("http://", "https://")):
            raise ValueError(f"Webhook URL must be http(s): {value!r}")
        return value


class ChatAppConfig(BaseModel):
    """App-level config — shared across all visitors."""
    app_title: str = "🏡 Real Estate AI Chatbot"
    accent_color: str = "#2563eb"
    input_placeholder: str = "Ask anything about our real estate listings..."
    storage_key: str = "sessionId"
    webhook: WebhookConfig = Field(default_factory=WebhookConfig)

    @field_validator("accent_color")
    @classmethod
    def _check_accent(cls, value: str) -> str:
        if value and not _HEX_COLOR_RE.match(value):
            raise ValueError(f"Invalid accent color: {value!r}")
        return value

    @property
    def theme(self) -> ThemeConfig | None:
        return ThemeConfig.from_hex(self.accent_color) if self.accent_color else None

    @classmethod
    def from_env(cls) -> "ChatAppConfig":
        """Build the config from ``REALTY_CHAT_*`` environment variables.

        Unset variables keep their defaults.
        """
        webhook_kwargs = {}
        if os.environ.get("REALTY_CHAT_PROFILE_URL"):
            webhook_kwargs["profile_url"] = os.environ["REALTY_CHAT_PROFILE_URL"]
        if os.environ.get("REALTY_CHAT_QUESTION_URL"):
            webhook_kwargs["question_url"] = os.environ["REALTY_CHAT_QUESTION_URL"]
        if os.environ.get("REALTY_CHAT_TIMEOUT"):
            webhook_kwargs["request_timeout"] = float(os.environ["REALTY_CHAT_TIMEOUT"])

        app_kwargs = {}
        if os.environ.get("REALTY_CHAT_TITLE"):
            app_kwargs["app_title"] = os.environ["REALTY_CHAT_TITLE"]
        if os.environ.get("REALTY_CHAT_ACCENT"):
            app_kwargs["accent_color"] = os.environ["REALTY_CHAT_ACCENT"]

        return cls(webhook=WebhookConfig(**webhook_kwargs), **app_kwargs)
