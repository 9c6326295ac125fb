"""NiceGUI interface - thin visualization layer for chat interactions.

Responsibilities:
    - Transcript display with a typing indicator while an exchange is pending
    - PDF upload for document context
    - Scrolling to the latest message on every state change

Observes session state and calls its entry points. Contains no business
logic.
"""
