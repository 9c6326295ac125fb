"""Unit tests for individual components in isolation.

Coverage:
    - session/: Transcript, pending flag and listeners
    - chat/: Payload building, reply extraction and the pending guard
    - client/: Gemini request shape and error mapping
    - parsing/: Page text joining, validation and document attachment

Uses scripted fakes for the completion and document capabilities.
"""
