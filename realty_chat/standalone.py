"""Standalone chat server — run realty-chat as its own NiceGUI app.

Usage::

    cd samples/chat
    poetry run python app.py

    # Or via script entry point from anywhere:
    poetry run realty-chat

    # Custom port:
    PORT=9000 poetry run realty-chat

Environment variables:
    PORT                      — Server port (default: 8080)
    STORAGE_SECRET            — Secret signing the browser storage cookie
    REALTY_CHAT_PROFILE_URL   — Visitor profile webhook
    REALTY_CHAT_QUESTION_URL  — Question/answer webhook
    REALTY_CHAT_TIMEOUT       — Request timeout in seconds (default: 60)
    REALTY_CHAT_TITLE         — Page heading
    REALTY_CHAT_ACCENT        — Accent color as hex

Loads .env from the current working directory or any parent directory.
"""

import logging
import os
import secrets

logger = logging.getLogger(__name__)


def create_pages():
    """Register the chat page route and return the app config in use."""
    from nicegui import ui

    from realty_chat.chat_config import ChatAppConfig
    from realty_chat.chat_page import ChatPage

    app_config = ChatAppConfig.from_env()
    chat_page = ChatPage(app_config)

    @ui.page("/")
    async def index():
        await chat_page.render()

    return app_config


def main():
    """Load .env, configure logging, and start the server."""
    # find_dotenv() searches upward through parent directories
    from dotenv import load_dotenv, find_dotenv
    load_dotenv(find_dotenv(usecwd=True))

    from nicegui import ui

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s — %(message)s",
        datefmt="%H:%M:%S",
    )

    port = int(os.environ.get("PORT", "8080"))
    storage_secret = os.environ.get("STORAGE_SECRET")
    if not storage_secret:
        storage_secret = secrets.token_urlsafe(32)
        logger.warning("STORAGE_SECRET not set, using a random one; browser sessions reset on restart")

    app_config = create_pages()

    print(f"\n  realty-chat → http://localhost:{port}\n")
    ui.run(
        host="0.0.0.0",
        port=port,
        title=app_config.app_title,
        storage_secret=storage_secret,
        reload=False,
        show=False,
    )


if __name__ in {"__main__", "__mp_main__"}:
    main()
