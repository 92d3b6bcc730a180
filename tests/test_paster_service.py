import pytest

from paster.clipboard.linux import LinuxClipboard
from paster.config import PasterConfig
from paster.database.card_store import CardStore
from paster.services.paster_service import PasterService
from paster.utils.fingerprint import fingerprint


@pytest.fixture
def service(clipboard):
    svc = PasterService(config=PasterConfig(poll_interval=60.0), clipboard=clipboard)
    yield svc
    svc.stop()


def test_capture_and_list(service, clipboard):
    clipboard.text = "first"
    service.capture_now()
    clipboard.text = "second"
    service.capture_now()

    assert [c.content for c in service.get_all_cards()] == ["second", "first"]


def test_on_card_created_fires_once_per_admission(service, clipboard):
    created = []
    service.on_card_created(created.append)
    service.start()

    clipboard.text = "hello"
    service.watcher.poll_once()
    service.watcher.poll_once()
    service.capture_now()

    assert [c.content for c in created] == ["hello"]


def test_paste_card_content_stages_without_new_card(service, clipboard):
    service.start()
    clipboard.text = "original"
    service.watcher.poll_once()

    assert service.paste_card_content("staged text") is True
    assert clipboard.writes == ["staged text"]
    assert service.watcher.poll_once() is None
    assert len(service.get_all_cards()) == 1


def test_paste_card(service, clipboard):
    clipboard.text = "reuse me"
    card = service.capture_now()
    clipboard.text = "something else"

    assert service.paste_card(card.id) is True
    assert clipboard.text == "reuse me"
    assert service.paste_card("c_missing") is None


def test_paste_failure_returns_false(service, clipboard):
    clipboard.fail = True
    assert service.paste_card_content("x") is False


def test_peek_clipboard(service, clipboard):
    clipboard.text = "peek"
    assert service.peek_clipboard() == "peek"
    clipboard.fail = True
    assert service.peek_clipboard() == ""


def test_panel_events(service, clipboard):
    calls = []
    service.on_show_panel(lambda: calls.append("show"))
    service.on_hide_panel(lambda: calls.append("hide"))
    clipboard.text = "card"
    service.capture_now()

    cards = service.show_panel()
    assert service.panel_visible
    assert [c.content for c in cards] == ["card"]

    service.hide_panel()
    assert not service.panel_visible
    assert calls == ["show", "hide"]


def test_broken_panel_listener_is_logged(service):
    def broken():
        raise RuntimeError("ui gone")

    service.on_show_panel(broken)
    assert service.show_panel() == []


def test_pin_and_tags(service, clipboard):
    clipboard.text = "x"
    card = service.capture_now()

    assert service.pin_card(card.id).is_pinned
    assert service.set_card_tags(card.id, ["a"]).tags == ("a",)


def test_capacity_from_config(clipboard):
    svc = PasterService(config=PasterConfig(capacity=2), clipboard=clipboard)
    for text in ("a", "b", "c"):
        clipboard.text = text
        svc.capture_now()
    assert [c.content for c in svc.get_all_cards()] == ["c", "b"]


def test_context_manager(clipboard):
    with PasterService(config=PasterConfig(poll_interval=60.0), clipboard=clipboard) as svc:
        assert svc.is_running
    assert not svc.is_running


def test_injected_store_is_used(clipboard):
    store = CardStore(capacity=3)
    svc = PasterService(config=PasterConfig(poll_interval=60.0), clipboard=clipboard, store=store)
    clipboard.text = "kept"
    svc.capture_now()

    assert svc.store is store
    assert svc.clipboard is clipboard
    assert [c.content for c in store.all()] == ["kept"]
    assert store.capacity == 3


def test_failed_paste_does_not_hide_real_copy(service, clipboard):
    service.start()
    clipboard.text = "before"
    service.watcher.poll_once()
    clipboard.fail = True
    assert service.paste_card_content("never staged") is False
    assert service.watcher.last_fingerprint == fingerprint("before")

    # the user copies the same text for real
    clipboard.fail = False
    clipboard.text = "never staged"
    card = service.watcher.poll_once()
    assert card is not None
    assert card.content == "never staged"


def test_backend_chosen_from_config():
    svc = PasterService(config=PasterConfig(clipboard_backend="linux"))
    assert isinstance(svc.clipboard, LinuxClipboard)
