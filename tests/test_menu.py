import pytest

from parking2d.geometry import Vec2
from parking2d.menu import (
    Button,
    ButtonState,
    KeyPress,
    MenuManager,
    MenuOption,
    MenuState,
    MouseClick,
)


def _center(button):
    return button.position + button.size * 0.5


def _click(button, mouse="left"):
    c = _center(button)
    return MouseClick(c.x, c.y, mouse)


@pytest.fixture
def menu(tmp_path):
    m = MenuManager(font=object(), instructions_path=tmp_path / "missing.txt")
    m.initialize_menu()
    return m


def test_button_hit_test_edges():
    button = Button(Vec2(10, 20), Vec2(30, 40), "Go")
    assert button.is_clicked(Vec2(10, 20))
    assert button.is_hovered(Vec2(39.9, 59.9))
    assert not button.is_clicked(Vec2(40, 30))
    assert not button.is_clicked(Vec2(9.9, 30))


def test_button_update_and_colors():
    button = Button(Vec2(0, 0), Vec2(10, 10), "Go")
    button.set_colors((1, 1, 1), (2, 2, 2), (3, 3, 3))
    button.update(Vec2(5, 5))
    assert button.state is ButtonState.HOVERED
    assert button.fill_color == (2, 2, 2)
    button.update(Vec2(50, 50))
    assert button.state is ButtonState.NORMAL
    assert button.fill_color == (1, 1, 1)


def test_menu_builds_three_buttons_inside_background(menu):
    assert [b.text for b in menu.buttons] == ["Start Game", "Instructions", "Exit"]
    for button in menu.buttons:
        assert menu.background.left <= button.bounds.left
        assert button.bounds.right <= menu.background.right
    tops = [b.position.y for b in menu.buttons]
    assert tops == sorted(tops)


def test_click_start(menu):
    assert menu.handle_menu_input(_click(menu.buttons[0])) is MenuOption.START_GAME
    assert menu.selected_option is MenuOption.START_GAME


def test_click_exit(menu):
    assert menu.handle_menu_input(_click(menu.buttons[2])) is MenuOption.EXIT
    assert menu.selected_option is MenuOption.EXIT


def test_click_instructions_and_back(menu):
    assert menu.handle_menu_input(_click(menu.buttons[1])) is MenuOption.NONE
    assert menu.state is MenuState.INSTRUCTIONS
    assert menu.handle_menu_input(_click(menu.buttons[0])) is MenuOption.NONE
    assert menu.state is MenuState.INSTRUCTIONS
    assert menu.handle_menu_input(KeyPress("q")) is MenuOption.NONE
    assert menu.state is MenuState.MAIN


def test_right_click_and_miss_do_nothing(menu):
    assert menu.handle_menu_input(_click(menu.buttons[0], "right")) is MenuOption.NONE
    assert menu.handle_menu_input(MouseClick(0, 0)) is MenuOption.NONE
    assert menu.selected_option is MenuOption.NONE


def test_space_starts_game(menu):
    assert menu.handle_menu_input(KeyPress("space")) is MenuOption.START_GAME
    menu.reset_selection()
    assert menu.selected_option is MenuOption.NONE


def test_return_to_main_menu(menu):
    menu.handle_menu_input(_click(menu.buttons[1]))
    menu.return_to_main_menu()
    assert menu.state is MenuState.MAIN


def test_update_hovers_only_in_main(menu):
    target = menu.buttons[2]
    menu.update(_center(target))
    assert target.state is ButtonState.HOVERED
    assert menu.buttons[0].state is ButtonState.NORMAL
    menu.handle_menu_input(_click(menu.buttons[1]))
    menu.update(_center(menu.buttons[0]))
    assert menu.buttons[0].state is ButtonState.NORMAL


def test_default_instructions(menu):
    assert menu.instructions_content.startswith("GAME INSTRUCTIONS")
    assert menu.instructions_content.endswith("Press any key to return to menu")
    assert menu.instructions_text == menu.instructions_content


def test_instructions_from_file(tmp_path):
    path = tmp_path / "instructions.txt"
    path.write_text("line one\nline two", encoding="utf-8")
    m = MenuManager(font=object(), instructions_path=path)
    m.initialize_menu()
    assert m.instructions_content == "line one\nline two\n"


def test_no_font_leaves_instruction_text_empty(tmp_path):
    m = MenuManager(font=None, instructions_path=tmp_path / "missing.txt")
    m.initialize_menu()
    assert m.instructions_text == ""
    assert m.instructions_content.startswith("GAME INSTRUCTIONS")


def test_input_before_initialize_returns_none(tmp_path):
    m = MenuManager(instructions_path=tmp_path / "missing.txt")
    assert m.handle_menu_input(MouseClick(300, 300)) is MenuOption.NONE