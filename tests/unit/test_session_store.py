"""Unit tests for the in-memory session store."""

import pytest
import pytest_check as check

from arix.models.schemas import Role
from arix.session.store import SessionStore


class TestAppendMessage:
    """Tests for transcript appends."""

    def test_appends_in_call_order_with_increasing_ids(self, store: SessionStore) -> None:
        """Messages keep call order and get strictly increasing ids."""
        first = store.append_message(Role.USER, "Hi")
        second = store.append_message(Role.MODEL, "Hello!")
        third = store.append_message(Role.USER, "How are you?")

        check.equal([m.content for m in store.transcript], ["Hi", "Hello!", "How are you?"])
        check.less(first.id, second.id)
        check.less(second.id, third.id)

    def test_accepts_role_strings(self, store: SessionStore) -> None:
        """Plain role strings are coerced to Role members."""
        message = store.append_message("model", "Hello!")

        assert message.role is Role.MODEL

    def test_rejects_blank_user_content(self, store: SessionStore) -> None:
        """Blank user content raises and leaves the transcript empty."""
        with pytest.raises(ValueError, match="must not be empty"):
            store.append_message(Role.USER, "   ")

        assert store.transcript == ()

    def test_transcript_is_read_only_snapshot(self, store: SessionStore) -> None:
        """The exposed transcript is an immutable tuple."""
        store.append_message(Role.USER, "Hi")
        snapshot = store.transcript

        store.append_message(Role.MODEL, "Hello!")

        check.is_instance(snapshot, tuple)
        check.equal(len(snapshot), 1)
        check.equal(len(store.transcript), 2)

    def test_ids_are_per_store(self) -> None:
        """Separate stores number their messages independently."""
        a, b = SessionStore(), SessionStore()

        a.append_message(Role.USER, "one")
        a.append_message(Role.USER, "two")
        first_b = b.append_message(Role.USER, "other")

        check.equal(first_b.id, 1)
        check.equal(len(b.transcript), 1)


class TestPendingAndContext:
    """Tests for the pending flag and document context."""

    def test_pending_defaults_false(self, store: SessionStore) -> None:
        assert store.pending is False

    def test_set_pending_toggles(self, store: SessionStore) -> None:
        store.set_pending(True)
        check.is_true(store.pending)
        store.set_pending(False)
        check.is_false(store.pending)

    def test_document_context_replaces(self, store: SessionStore) -> None:
        """A new context overwrites the old one and its name."""
        store.set_document_context("first text", "first.pdf")
        store.set_document_context("second text", "second.pdf")

        check.equal(store.document_context, "second text")
        check.equal(store.document_name, "second.pdf")

    def test_empty_context_clears(self, store: SessionStore) -> None:
        """Empty text clears both the context and the name."""
        store.set_document_context("text", "doc.pdf")
        store.set_document_context("", "ignored.pdf")

        check.is_none(store.document_context)
        check.is_none(store.document_name)


class TestSubscribe:
    """Tests for store listeners."""

    def test_listener_sees_every_mutation(self, store: SessionStore) -> None:
        """Listeners run after appends, pending changes and context changes."""
        seen: list[tuple[int, bool]] = []
        store.subscribe(lambda s: seen.append((len(s.transcript), s.pending)))

        store.append_message(Role.USER, "Hi")
        store.set_pending(True)
        store.set_document_context("ctx", "doc.pdf")

        assert seen == [(1, False), (1, True), (1, True)]

    def test_unsubscribe_stops_notifications(self, store: SessionStore) -> None:
        calls: list[SessionStore] = []
        unsubscribe = store.subscribe(calls.append)

        unsubscribe()
        store.set_pending(True)

        assert calls == []

    def test_failing_listener_does_not_undo_mutation(self, store: SessionStore) -> None:
        """A raising listener is logged; the mutation still stands."""

        def broken(_: SessionStore) -> None:
            raise RuntimeError("render failed")

        store.subscribe(broken)
        store.append_message(Role.USER, "Hi")

        assert len(store.transcript) == 1
