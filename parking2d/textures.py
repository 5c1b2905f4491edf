"""Texture loading and lookup by id."""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from PIL import Image

from .exceptions import ResourceNotFoundException

Color = tuple[int, int, int, int]

WHITE: Color = (255, 255, 255, 255)
TRANSPARENT: Color = (0, 0, 0, 0)
_NEAR_WHITE = 240

_GAME_TEXTURES = (
    ("level_0", "level_0.png"),
    ("level_1", "level_1.png"),
    ("level_2", "level_2.png"),
    ("car_player_yellow", "car_yellow.png"),
    ("car_player", "car_aqua.png"),
    ("parked_car_red", "car_red.png"),
    ("parked_car_blue", "car_blue.png"),
    ("parked_car_green", "car_orange.png"),
    ("moving_car", "car_pink.png"),
    ("traffic_cone", "cone.png"),
    ("parking_spot", "parking_spot.png"),
    ("youwin", "youwin.png"),
    ("gameover", "gameover.png"),
    ("blank", "blank.png"),
)
_OPAQUE_TEXTURES = frozenset({"background", "youwin", "menu_background", "gameover"})


@dataclass
class Texture:
    """A loaded RGBA image ready to be drawn."""

    image: Image.Image
    smooth: bool = True

    @property
    def size(self) -> tuple[int, int]:
        return self.image.size


def _open_image(texture_id: str, filename: str) -> Image.Image:
    try:
        with Image.open(filename) as img:
            img.load()
            return img.convert("RGBA")
    except (OSError, ValueError) as exc:
        raise ResourceNotFoundException(texture_id, filename) from exc


class TextureManager:
    """Keeps every loaded texture under its id."""

    _instance: ClassVar[TextureManager | None] = None

    def __init__(self) -> None:
        self._textures: dict[str, Texture] = {}

    @classmethod
    def get_instance(cls) -> TextureManager:
        """Return the shared manager, creating it on first use."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def shutdown(cls) -> None:
        """Drop every texture and the shared manager."""
        if cls._instance is not None:
            cls._instance.unload_all_textures()
            cls._instance = None

    @property
    def loaded_texture_count(self) -> int:
        return len(self._textures)

    def load_texture(self, texture_id: str, filename: str) -> None:
        """Load an image under an id; an id already loaded is left as it is."""
        if self.has_texture(texture_id):
            return
        self._textures[texture_id] = Texture(_open_image(texture_id, filename))

    def load_texture_with_transparency(
        self, texture_id: str, filename: str, transparent_color: Color = WHITE
    ) -> None:
        """Load an image, turning near-white pixels fully transparent."""
        if self.has_texture(texture_id):
            return
        image = _open_image(texture_id, filename)
        image.putdata(
            [
                TRANSPARENT
                if r > _NEAR_WHITE and g > _NEAR_WHITE and b > _NEAR_WHITE
                else (r, g, b, a)
                for r, g, b, a in image.getdata()
            ]
        )
        self._textures[texture_id] = Texture(image)

    def get_texture(self, texture_id: str) -> Texture:
        try:
            return self._textures[texture_id]
        except KeyError:
            raise ResourceNotFoundException(texture_id, "Texture not found in manager") from None

    def has_texture(self, texture_id: str) -> bool:
        return texture_id in self._textures

    def unload_texture(self, texture_id: str) -> None:
        self._textures.pop(texture_id, None)

    def unload_all_textures(self) -> None:
        self._textures.clear()

    def load_all_game_textures(self) -> None:
        """Load every game texture from the working directory."""
        for texture_id, filename in _GAME_TEXTURES:
            if texture_id in _OPAQUE_TEXTURES:
                self.load_texture(texture_id, filename)
            else:
                self.load_texture_with_transparency(texture_id, filename)