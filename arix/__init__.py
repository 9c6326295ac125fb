"""Arix - browser chat with optional PDF context, backed by Gemini.

Combines NiceGUI for the chat page, FastAPI for hosting and HTTP routes,
httpx for the completion calls, pypdf for text extraction and Pydantic
for data validation.

Components:
    - session: In-memory transcript, pending flag and document context
    - chat: Exchange controller and the per-visit chat session
    - client: Gemini generateContent client and its configuration
    - parsing: PDF text extraction
    - api: HTTP endpoints
    - ui: Web interface for chat interactions
    - models: Pydantic schemas
"""

__version__ = "0.1.0"
