from typing import Any, Dict, List

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from paster.services.paster_service import PasterService


class PasteRequest(BaseModel):
    text: str


class PinRequest(BaseModel):
    pinned: bool = True


class TagsRequest(BaseModel):
    tags: List[str] = Field(default_factory=list)


def _serialize(cards) -> List[Dict[str, Any]]:
    return [card.to_dict() for card in cards]


def create_app(service: PasterService) -> FastAPI:
    """Local HTTP bridge used by the panel UI."""
    app = FastAPI(title="Paster")

    @app.get("/")
    def root():
        return "running"

    @app.get("/cards")
    def get_all_cards():
        return _serialize(service.get_all_cards())

    @app.get("/cards/{card_id}")
    def get_card(card_id: str):
        card = service.get_card(card_id)
        if card is None:
            raise HTTPException(status_code=404, detail="card not found")
        return card.to_dict()

    @app.post("/cards/capture")
    def capture_now():
        card = service.capture_now()
        return {"created": card is not None, "card": card.to_dict() if card else None}

    @app.post("/cards/{card_id}/paste")
    def paste_card(card_id: str):
        ok = service.paste_card(card_id)
        if ok is None:
            raise HTTPException(status_code=404, detail="card not found")
        return {"ok": ok}

    @app.patch("/cards/{card_id}/pin")
    def pin_card(card_id: str, body: PinRequest):
        if service.get_card(card_id) is None:
            raise HTTPException(status_code=404, detail="card not found")
        card = service.pin_card(card_id, body.pinned)
        if card is None:
            raise HTTPException(status_code=409, detail="too many pinned cards")
        return card.to_dict()

    @app.put("/cards/{card_id}/tags")
    def set_tags(card_id: str, body: TagsRequest):
        card = service.set_card_tags(card_id, body.tags)
        if card is None:
            raise HTTPException(status_code=404, detail="card not found")
        return card.to_dict()

    @app.post("/paste")
    def paste_content(body: PasteRequest):
        return {"ok": service.paste_card_content(body.text)}

    @app.get("/clipboard")
    def get_clipboard_data():
        return {"text": service.peek_clipboard()}

    @app.post("/panel/show")
    def show_panel():
        cards = service.show_panel()
        return {"visible": True, "cards": _serialize(cards)}

    @app.post("/panel/hide")
    def hide_panel():
        service.hide_panel()
        return {"visible": False}

    return app
