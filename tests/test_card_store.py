from datetime import datetime

import pytest

from paster.database.card_store import CardStore
from paster.models.card import ContentType
from paster.utils.fingerprint import fingerprint


def test_admit_builds_card(store):
    card = store.admit("  hello world \n")

    assert card is not None
    assert card.content == "hello world"
    assert card.content_type == ContentType.TEXT
    assert card.title == "hello world"
    assert card.content_hash == fingerprint("hello world")
    assert card.is_pinned is False
    assert card.tags == ()
    assert card.source == "clipboard"
    assert isinstance(card.created_at, datetime)
    assert card.id.startswith("c_")


@pytest.mark.parametrize("text", ["", "   ", "\n\t"])
def test_admit_rejects_empty(store, text):
    assert store.admit(text) is None
    assert len(store) == 0


def test_head_duplicate_is_rejected(store):
    assert store.admit("same") is not None
    assert store.admit("same") is None
    assert store.admit(" same ") is None
    assert len(store) == 1


def test_non_adjacent_repeat_is_admitted(store):
    store.admit("A")
    store.admit("B")
    again = store.admit("A")

    assert again is not None
    assert [c.content for c in store.all()] == ["A", "B", "A"]
    assert len({c.id for c in store.all()}) == 3


def test_order_is_most_recent_first(store):
    for text in ("one", "two", "three"):
        store.admit(text)
    assert [c.content for c in store.all()] == ["three", "two", "one"]
    assert store.head().content == "three"


def test_capacity_evicts_oldest(store):
    for i in range(51):
        store.admit(f"item {i}")

    cards = store.all()
    assert len(cards) == 50
    assert cards[0].content == "item 50"
    assert cards[-1].content == "item 1"
    assert not store.is_active(fingerprint("item 0"))
    assert store.is_active(fingerprint("item 1"))


def test_evicted_content_can_return(store):
    for i in range(51):
        store.admit(f"item {i}")

    card = store.admit("item 0")
    assert card is not None
    assert store.head().content == "item 0"
    assert len(store) == 50


def test_fingerprint_index_counts_repeats():
    store = CardStore(capacity=3)
    store.admit("A")
    store.admit("B")
    store.admit("A")
    store.admit("C")  # evicts the first A

    assert store.is_active(fingerprint("A"))
    store.admit("D")  # evicts B
    store.admit("E")  # evicts the second A
    assert not store.is_active(fingerprint("A"))


def test_all_is_a_snapshot(store):
    store.admit("a")
    snapshot = store.all()
    snapshot.clear()
    assert len(store) == 1


def test_clear(store):
    store.admit("a")
    store.admit("b")
    store.clear()

    assert store.all() == []
    assert store.head() is None
    assert not store.is_active(fingerprint("a"))
    assert store.admit("b") is not None


def test_pinned_cards_survive_eviction():
    store = CardStore(capacity=3)
    first = store.admit("keep me")
    store.pin(first.id)
    for text in ("b", "c", "d", "e"):
        store.admit(text)

    contents = [c.content for c in store.all()]
    assert len(contents) == 3
    assert "keep me" in contents
    assert contents == ["e", "d", "keep me"]


def test_pin_returns_updated_copy(store):
    card = store.admit("x")
    pinned = store.pin(card.id)

    assert pinned.id == card.id
    assert pinned.is_pinned
    assert not card.is_pinned
    assert store.get(card.id).is_pinned
    assert store.pin(card.id, pinned=False).is_pinned is False


def test_pin_refused_when_no_unpinned_slot_left():
    store = CardStore(capacity=3)
    a = store.admit("a")
    b = store.admit("b")
    c = store.admit("c")

    assert store.pin(a.id) is not None
    assert store.pin(b.id) is not None
    assert store.pin(c.id) is None
    assert not store.get(c.id).is_pinned


def test_pin_unknown_card(store):
    assert store.pin("c_missing") is None


def test_set_tags(store):
    card = store.admit("x")
    updated = store.set_tags(card.id, ["work", " work ", "", "later"])

    assert updated.tags == ("work", "later")
    assert store.get(card.id).tags == ("work", "later")
    assert store.set_tags("c_missing", ["a"]) is None


def test_head_duplicate_check_sees_pinned_head(store):
    card = store.admit("x")
    store.pin(card.id)
    assert store.admit("x") is None


def test_invalid_capacity():
    with pytest.raises(ValueError):
        CardStore(capacity=0)


def test_card_serializes_with_camel_case(store):
    data = store.admit("https://a.com").to_dict()

    assert data["contentType"] == "url"
    assert data["isPinned"] is False
    assert "createdAt" in data
    assert "contentHash" in data


def test_snapshot_tags_cannot_change_store(store):
    card = store.admit("x")
    store.set_tags(card.id, ["work"])

    snapshot = store.all()[0]
    with pytest.raises(AttributeError):
        snapshot.tags.append("leak")
    with pytest.raises(ValueError):
        snapshot.tags = ("leak",)

    assert store.get(card.id).tags == ("work",)
    assert store.get(card.id).to_dict()["tags"] == ["work"]
