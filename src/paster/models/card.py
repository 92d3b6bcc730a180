from datetime import datetime
from enum import Enum
from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from ulid import ULID


class ContentType(str, Enum):
    TEXT = "text"
    URL = "url"
    HTML = "html"
    CODE = "code"


def new_card_id(created_at: datetime) -> str:
    return f"c_{ULID.from_datetime(created_at)}"


class Card(BaseModel):
    """
    One captured clipboard entry.

    Cards are frozen; pin and tag updates go through the store, which swaps
    in a copy carrying the same id.
    """
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )

    id: str
    content: str
    content_type: ContentType
    title: str
    created_at: datetime = Field(default_factory=datetime.now)
    is_pinned: bool = False
    tags: Tuple[str, ...] = ()
    content_hash: str
    source: str = "clipboard"

    def to_dict(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)
