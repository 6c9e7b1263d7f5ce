#!/usr/bin/env python3
"""Standalone chat app — run realty-chat as a NiceGUI server.

    cd samples/chat
    poetry run python app.py

Starts on http://localhost:8080. Point the chat at your own webhooks with
REALTY_CHAT_PROFILE_URL and REALTY_CHAT_QUESTION_URL.

Environment variables:
    PORT            — Server port (default: 8080)
    STORAGE_SECRET  — Secret signing the browser storage cookie
"""
from realty_chat.standalone import main

if __name__ in {"__main__", "__mp_main__"}:
    main()
