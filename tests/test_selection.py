from dataclasses import replace

from popmenu.core.popup import MAX_HEIGHT, MAX_WIDTH
from popmenu.core.selection import (
    create,
    current_selection,
    normalize,
    select_next,
    select_previous,
    set_items,
)


def test_create_starts_without_selection(abc_menu):
    assert abc_menu.items == ("a", "b", "c")
    assert abc_menu.selected_index is None
    assert current_selection(abc_menu) is None
    assert abc_menu.popup.visible is False
    assert abc_menu.popup.anchor is None
    assert (abc_menu.popup.max_width, abc_menu.popup.max_height) == (MAX_WIDTH, MAX_HEIGHT)


def test_create_copies_items_into_a_tuple():
    source = ["x", "y"]
    menu = create(lambda context, item: item, source)
    source.append("z")

    assert menu.items == ("x", "y")


def test_select_next_walks_forward_and_wraps(abc_menu):
    menu = select_next(abc_menu)
    assert menu.selected_index == 0
    menu = select_next(menu)
    assert menu.selected_index == 1
    menu = select_next(menu)
    assert menu.selected_index == 2
    menu = select_next(menu)
    assert menu.selected_index == 0


def test_select_previous_decrements_and_wraps_to_last(abc_menu):
    menu = replace(abc_menu, selected_index=2)

    menu = select_previous(menu)
    assert menu.selected_index == 1
    menu = select_previous(menu)
    assert menu.selected_index == 0
    menu = select_previous(menu)
    assert menu.selected_index == 2


def test_select_previous_without_selection_picks_last_item(abc_menu):
    menu = select_previous(abc_menu)

    assert menu.selected_index == 2
    assert current_selection(menu) == "c"


def test_navigation_on_empty_menu_keeps_no_selection(empty_menu):
    assert select_next(empty_menu).selected_index is None
    assert select_previous(empty_menu).selected_index is None
    assert current_selection(select_next(empty_menu)) is None


def test_normalize_wraps_out_of_range_indices(abc_menu):
    assert normalize(replace(abc_menu, selected_index=3)).selected_index == 0
    assert normalize(replace(abc_menu, selected_index=7)).selected_index == 0
    assert normalize(replace(abc_menu, selected_index=-1)).selected_index == 2
    assert normalize(replace(abc_menu, selected_index=1)).selected_index == 1


def test_normalize_clears_selection_for_empty_items(empty_menu):
    stale = replace(empty_menu, selected_index=4)

    assert normalize(stale).selected_index is None


def test_normalize_returns_same_state_when_valid(abc_menu):
    menu = replace(abc_menu, selected_index=1)

    assert normalize(menu) is menu


def test_set_items_replaces_wholesale_and_renormalizes_on_read():
    menu = create(lambda context, item: item, ["a", "b"])
    menu = select_next(select_next(menu))
    assert menu.selected_index == 1

    menu = set_items(["x"], menu)

    assert menu.items == ("x",)
    assert current_selection(menu) == "x"
    assert menu.selected_item == "x"


def test_set_items_to_empty_drops_selection(abc_menu):
    menu = set_items([], select_next(abc_menu))

    assert current_selection(menu) is None
    assert select_next(menu).selected_index is None


def test_set_items_keeps_renderer_and_popup(abc_menu):
    menu = set_items(["q"], abc_menu)

    assert menu.renderer is abc_menu.renderer
    assert menu.popup == abc_menu.popup
