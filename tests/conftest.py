import pytest

from popmenu.core.selection import MenuState, RenderContext, create


def plain_renderer(context: RenderContext, item):
    return str(item)


@pytest.fixture
def abc_menu() -> MenuState[str]:
    """Provide a three item menu with nothing selected."""

    return create(plain_renderer, ["a", "b", "c"])


@pytest.fixture
def empty_menu() -> MenuState[str]:
    return create(plain_renderer, [])
