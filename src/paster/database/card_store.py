import logging
import threading
from datetime import datetime
from typing import Dict, Iterable, Iterator, List, Optional

from paster.models.card import Card, new_card_id
from paster.utils.classifier import classify
from paster.utils.fingerprint import fingerprint, normalize
from paster.utils.summarizer import summarize

logger = logging.getLogger(__name__)

DEFAULT_CAPACITY = 50


class CardStore:
    """
    Bounded, most-recent-first card history.

    Duplicate suppression only looks at the head card, so copying an older
    entry again produces a fresh card. The fingerprint index counts how many
    stored cards carry each fingerprint and is kept in step with evictions.
    """

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._cards: List[Card] = []
        self._fingerprints: Dict[str, int] = {}
        self._lock = threading.RLock()

    def admit(self, raw_text: str, source: str = "clipboard") -> Optional[Card]:
        content = normalize(raw_text)
        if not content:
            return None

        content_hash = fingerprint(content)

        with self._lock:
            if self._cards and self._cards[0].content_hash == content_hash:
                logger.debug("Skipping duplicate of most recent card")
                return None

            created_at = datetime.now()
            card = Card(
                id=new_card_id(created_at),
                content=content,
                content_type=classify(content),
                title=summarize(content),
                created_at=created_at,
                content_hash=content_hash,
                source=source,
            )

            self._cards.insert(0, card)
            self._index(content_hash)
            self._evict()

            logger.info(f"Card created: {card.content_type.value} {card.title!r}")
            return card

    def all(self) -> List[Card]:
        with self._lock:
            return list(self._cards)

    def clear(self) -> None:
        with self._lock:
            self._cards.clear()
            self._fingerprints.clear()

    def get(self, card_id: str) -> Optional[Card]:
        with self._lock:
            for card in self._cards:
                if card.id == card_id:
                    return card
        return None

    def head(self) -> Optional[Card]:
        with self._lock:
            return self._cards[0] if self._cards else None

    def is_active(self, content_hash: str) -> bool:
        with self._lock:
            return content_hash in self._fingerprints

    def pin(self, card_id: str, pinned: bool = True) -> Optional[Card]:
        with self._lock:
            card = self.get(card_id)
            if card is None:
                return None
            if card.is_pinned == pinned:
                return card

            if pinned:
                pinned_count = sum(1 for c in self._cards if c.is_pinned)
                if pinned_count >= self.capacity - 1:
                    logger.warning(
                        f"Refusing to pin {card_id}: {pinned_count} of {self.capacity} slots already pinned")
                    return None

            return self._replace(card, is_pinned=pinned)

    def set_tags(self, card_id: str, tags: Iterable[str]) -> Optional[Card]:
        cleaned: List[str] = []
        for tag in tags:
            tag = tag.strip()
            if tag and tag not in cleaned:
                cleaned.append(tag)

        with self._lock:
            card = self.get(card_id)
            if card is None:
                return None
            return self._replace(card, tags=tuple(cleaned))

    def _replace(self, card: Card, **changes) -> Card:
        updated = card.model_copy(update=changes)
        position = self._cards.index(card)
        self._cards[position] = updated
        return updated

    def _index(self, content_hash: str) -> None:
        self._fingerprints[content_hash] = self._fingerprints.get(content_hash, 0) + 1

    def _unindex(self, content_hash: str) -> None:
        remaining = self._fingerprints.get(content_hash, 0) - 1
        if remaining > 0:
            self._fingerprints[content_hash] = remaining
        else:
            self._fingerprints.pop(content_hash, None)

    def _evict(self) -> None:
        position = len(self._cards) - 1
        while len(self._cards) > self.capacity and position >= 0:
            card = self._cards[position]
            if not card.is_pinned:
                del self._cards[position]
                self._unindex(card.content_hash)
                logger.debug(f"Evicted card {card.id}")
            position -= 1

        assert len(self._cards) <= self.capacity, "card store exceeded its capacity"

    def __len__(self) -> int:
        with self._lock:
            return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.all())
