"""The main menu: buttons, the instructions screen and menu input handling."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path
from typing import Any, Union

from .constants import WINDOW_HEIGHT, WINDOW_WIDTH
from .geometry import Rect, Vec2

Color = tuple[int, ...]

_DEFAULT_INSTRUCTIONS = (
    "GAME INSTRUCTIONS\n\n"
    "OBJECTIVE:\n"
    "Park your car in the designated parking spot\n"
    "without hitting obstacles or other cars.\n\n"
    "CONTROLS:\n"
    "W - Move Forward\n"
    "A - Turn Left\n"
    "S - Move Backward\n"
    "D - Turn Right\n"
    "H - Horn Sound\n"
    "P - Pause Game\n"
    "R - Restart Level\n"
    "ESC - Menu\n\n"
    "TIPS:\n"
    "- Drive carefully to avoid collisions\n"
    "- Use reverse to maneuver in tight spaces\n\n"
    "Press any key to return to menu"
)


class ButtonState(Enum):
    NORMAL = auto()
    HOVERED = auto()
    CLICKED = auto()


class Button:
    """A clickable rectangle with a label and a colour per state."""

    def __init__(self, position: Vec2, size: Vec2, text: str, font: Any = None) -> None:
        self.position = position
        self.size = size
        self.text = text
        self.font = font
        self.state = ButtonState.NORMAL
        self.normal_color: Color = (100, 100, 100, 255)
        self.hover_color: Color = (150, 150, 150, 255)
        self.click_color: Color = (70, 70, 70, 255)

    @property
    def bounds(self) -> Rect:
        return Rect(self.position.x, self.position.y, self.size.x, self.size.y)

    @property
    def fill_color(self) -> Color:
        """The colour for the button's current state."""
        return {
            ButtonState.NORMAL: self.normal_color,
            ButtonState.HOVERED: self.hover_color,
            ButtonState.CLICKED: self.click_color,
        }[self.state]

    def _contains(self, point: Vec2) -> bool:
        box = self.bounds
        return box.left <= point.x < box.right and box.top <= point.y < box.bottom

    def is_clicked(self, mouse_pos: Vec2) -> bool:
        return self._contains(mouse_pos)

    def is_hovered(self, mouse_pos: Vec2) -> bool:
        return self._contains(mouse_pos)

    def update(self, mouse_pos: Vec2) -> None:
        """Switch between the normal and hovered state as the mouse moves."""
        self.state = ButtonState.HOVERED if self.is_hovered(mouse_pos) else ButtonState.NORMAL

    def set_colors(self, normal: Color, hover: Color, click: Color) -> None:
        self.normal_color = normal
        self.hover_color = hover
        self.click_color = click


class MenuOption(Enum):
    NONE = auto()
    START_GAME = auto()
    INSTRUCTIONS = auto()
    EXIT = auto()


class MenuState(Enum):
    MAIN = auto()
    INSTRUCTIONS = auto()


@dataclass(frozen=True)
class MouseClick:
    """A mouse button press at a window position."""

    x: float
    y: float
    button: str = "left"


@dataclass(frozen=True)
class KeyPress:
    """A key press, named in lower case (``"space"``, ``"w"``...)."""

    key: str


MenuEvent = Union[MouseClick, KeyPress]


class MenuManager:
    """Lays out the main menu and the instructions screen and interprets input."""

    MENU_SIZE = Vec2(500.0, 400.0)
    BUTTON_SIZE = Vec2(280.0, 65.0)
    INSTRUCTIONS_SIZE = Vec2(700.0, 550.0)

    def __init__(self, font: Any = None, instructions_path: str | Path = "instructions.txt") -> None:
        self.font = font
        self.instructions_path = Path(instructions_path)
        self.selected_option = MenuOption.NONE
        self.state = MenuState.MAIN
        self.menu_position = Vec2(
            (WINDOW_WIDTH - self.MENU_SIZE.x) / 2, (WINDOW_HEIGHT - self.MENU_SIZE.y) / 2
        )
        self.buttons: list[Button] = []
        self.background = Rect()
        self.background_color: Color = (25, 35, 50, 200)
        self.outline_color: Color = (100, 150, 255, 255)
        self.instructions_content = ""
        self.instructions_text = ""
        self.instructions_background = Rect()
        self.instructions_text_position = Vec2()

    def initialize_menu(self) -> None:
        self._initialize_main_menu()
        self._load_instructions()
        self._initialize_instructions()

    def _initialize_main_menu(self) -> None:
        pos, size = self.menu_position, self.MENU_SIZE
        self.background = Rect(pos.x, pos.y, size.x, size.y)
        center_x = pos.x + (size.x - self.BUTTON_SIZE.x) / 2
        start_y = pos.y + 90.0
        specs = (
            ("Start Game", 0.0, ((50, 150, 50), (70, 200, 70), (30, 120, 30))),
            ("Instructions", 85.0, ((50, 100, 200), (70, 130, 255), (30, 80, 150))),
            ("Exit", 170.0, ((200, 50, 50), (255, 70, 70), (150, 30, 30))),
        )
        self.buttons = []
        for label, offset, colors in specs:
            button = Button(Vec2(center_x, start_y + offset), self.BUTTON_SIZE, label, self.font)
            button.set_colors(*colors)
            self.buttons.append(button)

    def _load_instructions(self) -> None:
        try:
            with self.instructions_path.open(encoding="utf-8") as handle:
                self.instructions_content = "".join(
                    line.rstrip("\r\n") + "\n" for line in handle
                )
        except OSError:
            self.instructions_content = _DEFAULT_INSTRUCTIONS

    def _initialize_instructions(self) -> None:
        if self.font is None:
            return
        size = self.INSTRUCTIONS_SIZE
        pos = Vec2((WINDOW_WIDTH - size.x) / 2, (WINDOW_HEIGHT - size.y) / 2)
        self.instructions_background = Rect(pos.x, pos.y, size.x, size.y)
        self.instructions_text = self.instructions_content
        self.instructions_text_position = Vec2(pos.x + 40, pos.y + 40)

    def handle_menu_input(self, event: MenuEvent) -> MenuOption:
        """Interpret an input event; returns the option chosen, if any."""
        if self.state is MenuState.MAIN:
            return self._handle_main_menu_input(event)
        if isinstance(event, KeyPress):
            self.state = MenuState.MAIN
        return MenuOption.NONE

    def _handle_main_menu_input(self, event: MenuEvent) -> MenuOption:
        if isinstance(event, MouseClick) and event.button == "left" and len(self.buttons) >= 3:
            point = Vec2(event.x, event.y)
            start, instructions, exit_button = self.buttons[:3]
            if start.is_clicked(point):
                self.selected_option = MenuOption.START_GAME
                return self.selected_option
            if instructions.is_clicked(point):
                self.state = MenuState.INSTRUCTIONS
                return MenuOption.NONE
            if exit_button.is_clicked(point):
                self.selected_option = MenuOption.EXIT
                return self.selected_option
        if isinstance(event, KeyPress) and event.key == "space":
            self.selected_option = MenuOption.START_GAME
            return self.selected_option
        return MenuOption.NONE

    def update(self, mouse_pos: Vec2) -> None:
        if self.state is MenuState.MAIN:
            for button in self.buttons:
                button.update(mouse_pos)

    def reset_selection(self) -> None:
        self.selected_option = MenuOption.NONE

    def return_to_main_menu(self) -> None:
        self.state = MenuState.MAIN