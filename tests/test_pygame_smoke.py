import pygame
import pytest

from popmenu import PygameContextMenu
from popmenu.core.context_keys import is_visible
from popmenu.pygame import config


def _key(key, mod=0, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key, mod=mod, unicode=unicode)


@pytest.fixture
def app(monkeypatch, tmp_path):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    monkeypatch.setattr(config, "_SETTINGS_PATH", tmp_path / "user_settings.json", raising=False)

    client = None
    try:
        client = PygameContextMenu(items=["append", "remove", "reverse"], debug=False)
        yield client
    finally:
        if client:
            client.running = False
        pygame.quit()


@pytest.mark.smoke
def test_client_initialises_with_hidden_menu(app) -> None:
    """Ensure the demo can boot in a headless environment."""

    assert not is_visible(app.menu)
    assert app.menu.items == ("append", "remove", "reverse")
    app.draw()


@pytest.mark.smoke
def test_keyboard_flow_inserts_selection(app) -> None:
    app.process_event(_key(pygame.K_SPACE, pygame.KMOD_LCTRL, " "))
    assert is_visible(app.menu)
    assert app.menu.popup.anchor == app.caret_position()

    app.process_event(_key(pygame.K_DOWN))
    assert app.message == "Focused: append"
    app.process_event(_key(pygame.K_n, pygame.KMOD_LCTRL))
    assert app.message == "Focused: remove"
    app.draw()

    app.process_event(_key(pygame.K_RETURN))
    assert not is_visible(app.menu)
    assert app.text == "items.remove"
    assert app.message == "Inserted: remove"


@pytest.mark.smoke
def test_typing_filters_items(app) -> None:
    app.process_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=3, pos=(50, 60)))
    assert is_visible(app.menu)
    assert app.menu.popup.anchor == (50, 60)

    app.process_event(_key(pygame.K_r, unicode="r"))
    app.process_event(_key(pygame.K_e, unicode="e"))
    app.process_event(_key(pygame.K_v, unicode="v"))
    assert app.menu.items == ("reverse",)

    app.process_event(_key(pygame.K_BACKSPACE))
    assert app.filter_text == "re"
    assert app.menu.items == ("remove", "reverse")

    app.process_event(_key(pygame.K_UP))
    assert app.message == "Focused: reverse"


@pytest.mark.smoke
def test_accept_without_selection_cancels(app) -> None:
    app.open_menu()

    app.process_event(_key(pygame.K_TAB))

    assert not is_visible(app.menu)
    assert app.message == "Nothing selected"
    assert app.text == "items."


@pytest.mark.smoke
def test_escape_dismisses_menu_then_quits(app) -> None:
    app.open_menu()

    app.process_event(_key(pygame.K_ESCAPE))
    assert not is_visible(app.menu)
    assert app.running

    app.process_event(_key(pygame.K_ESCAPE))
    assert not app.running


@pytest.mark.smoke
def test_popup_follows_caret(app) -> None:
    app.open_menu()
    before = app.menu.popup.anchor

    app.screen = pygame.display.set_mode((640, 480))
    app.update()

    assert app.menu.popup.anchor == app.caret_position()
    assert app.menu.popup.anchor != before


@pytest.mark.smoke
def test_reopened_menu_starts_without_selection(app) -> None:
    app.open_menu()
    app.process_event(_key(pygame.K_DOWN))
    app.process_event(_key(pygame.K_DOWN))
    app.process_event(_key(pygame.K_RETURN))
    assert app.message == "Inserted: remove"

    app.open_menu()

    assert app.menu.selected_index is None
    app.process_event(_key(pygame.K_DOWN))
    assert app.message == "Focused: append"


@pytest.mark.smoke
def test_function_keys_rebind_and_reset_menu_keys(app) -> None:
    app.process_event(_key(pygame.K_F2))
    assert app.message == "Press a key for Select Next key 1 (Esc to cancel)"

    app.process_event(_key(pygame.K_j, unicode="j"))
    assert app.message == "Select Next bound to j"
    assert app.text == "items."
    assert config.load_keybinding_config() == {}

    app.open_menu()
    app.process_event(_key(pygame.K_j, unicode="j"))
    assert app.message == "Focused: append"
    app.process_event(_key(pygame.K_ESCAPE))

    app.process_event(_key(pygame.K_F2))
    assert app.message == "Press a key for Select Next key 2 (Esc to cancel)"
    app.process_event(_key(pygame.K_ESCAPE))
    assert app.message == "Rebinding cancelled."
    assert app.running

    app.process_event(_key(pygame.K_F3))
    assert app.message == "Key bindings reset to defaults."
    assert app.keybindings.to_config()["contextMenu.selectNext"] == ["down", "ctrl+n"]
