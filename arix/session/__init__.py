"""In-memory session state shared by the controller and the UI."""

from arix.session.store import SessionStore, StoreListener

__all__ = ["SessionStore", "StoreListener"]
