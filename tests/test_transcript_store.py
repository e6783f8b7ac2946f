"""Tests for the append-only transcript."""

from __future__ import annotations

from pixelseeker.core.transcript_store import TranscriptStore
from pixelseeker.models.message import ASSISTANT_SENDER, Message
from pixelseeker.utils.replies import WELCOME_MESSAGE


def test_seeded_store_holds_only_welcome() -> None:
    store = TranscriptStore.seeded()
    assert len(store) == 1
    welcome = store.messages[0]
    assert welcome.text == WELCOME_MESSAGE
    assert welcome.direction == "incoming"
    assert welcome.sender == ASSISTANT_SENDER


def test_append_keeps_insertion_order() -> None:
    store = TranscriptStore()
    first = Message.from_user("one")
    second = Message.from_assistant("two")
    store.append(first)
    store.append(second)
    assert store.messages == (first, second)


def test_role_tagged_sequence_alternating() -> None:
    store = TranscriptStore.seeded()
    store.append(Message.from_user("what is a roguelike"))
    store.append(Message.from_assistant("A genre with permadeath."))
    store.append(Message.from_user("recommend one"))

    assert store.as_role_tagged_sequence() == [
        {"role": "assistant", "content": WELCOME_MESSAGE},
        {"role": "user", "content": "what is a roguelike"},
        {"role": "assistant", "content": "A genre with permadeath."},
        {"role": "user", "content": "recommend one"},
    ]


def test_role_depends_on_sender_not_direction() -> None:
    store = TranscriptStore()
    store.append(Message(text="odd", direction="incoming", sender="someone-else"))
    assert store.as_role_tagged_sequence() == [{"role": "user", "content": "odd"}]


def test_messages_view_is_a_snapshot() -> None:
    store = TranscriptStore.seeded()
    view = store.messages
    store.append(Message.from_user("hi"))
    assert len(view) == 1
    assert len(store) == 2


def test_messages_have_unique_ids_and_utc_timestamps() -> None:
    a = Message.from_user("a")
    b = Message.from_user("a")
    assert a.id != b.id
    assert a.timestamp.tzinfo is not None
