"""Test package for Arix chat.

Structure:
    - unit/: Store, controller, client and parser tests
    - integration/: Chat session and HTTP endpoint tests

External services are never contacted: the completion endpoint is served
by httpx.MockTransport and PDFs are built in memory.
Leverages pytest with pytest-check for soft assertions.
"""
