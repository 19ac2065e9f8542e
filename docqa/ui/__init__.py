"""NiceGUI interface - thin presentation layer over the chat state.

Responsibilities:
    - Document upload (click or drag and drop) and paste area
    - Chat transcript with quoted sources and copy buttons
    - Loading indicator and error banner
    - Dark/light theme toggle persisted per browser

Contains no question answering logic; delegates to docqa.chat.
"""
