"""Integration tests for components working together as a system.

Coverage:
    - Chat session wired to the real Gemini client over a mock transport
    - Document upload followed by exchanges carrying the extracted text
    - API endpoints over ASGITransport
"""
