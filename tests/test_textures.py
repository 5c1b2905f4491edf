import pytest
from PIL import Image

from parking2d.exceptions import ResourceNotFoundException
from parking2d.textures import TextureManager

_ALL_FILES = [
    "level_0.png", "level_1.png", "level_2.png", "car_yellow.png", "car_aqua.png",
    "car_red.png", "car_blue.png", "car_orange.png", "car_pink.png", "cone.png",
    "parking_spot.png", "youwin.png", "gameover.png", "blank.png",
]


def _write_png(path, colors):
    img = Image.new("RGBA", (len(colors), 1))
    img.putdata(colors)
    img.save(path)
    return str(path)


@pytest.fixture
def manager():
    return TextureManager()


def test_load_and_get(manager, tmp_path):
    path = _write_png(tmp_path / "a.png", [(10, 20, 30, 255), (1, 2, 3, 255)])
    manager.load_texture("a", path)
    assert manager.has_texture("a")
    texture = manager.get_texture("a")
    assert texture.size == (2, 1)
    assert texture.smooth is True
    assert texture.image.getpixel((0, 0)) == (10, 20, 30, 255)


def test_missing_file_raises(manager, tmp_path):
    with pytest.raises(ResourceNotFoundException):
        manager.load_texture("x", str(tmp_path / "nope.png"))
    assert not manager.has_texture("x")


def test_not_an_image_raises(manager, tmp_path):
    bad = tmp_path / "bad.png"
    bad.write_bytes(b"not an image")
    with pytest.raises(ResourceNotFoundException):
        manager.load_texture_with_transparency("bad", str(bad))


def test_get_unknown_raises(manager):
    with pytest.raises(ResourceNotFoundException):
        manager.get_texture("unknown")


def test_transparency_clears_near_white(manager, tmp_path):
    path = _write_png(
        tmp_path / "t.png",
        [(255, 255, 255, 255), (241, 250, 245, 255), (240, 255, 255, 255), (0, 0, 0, 255)],
    )
    manager.load_texture_with_transparency("t", path)
    image = manager.get_texture("t").image
    assert image.getpixel((0, 0)) == (0, 0, 0, 0)
    assert image.getpixel((1, 0)) == (0, 0, 0, 0)
    assert image.getpixel((2, 0)) == (240, 255, 255, 255)
    assert image.getpixel((3, 0)) == (0, 0, 0, 255)


def test_second_load_keeps_first(manager, tmp_path):
    first = _write_png(tmp_path / "1.png", [(1, 1, 1, 255)])
    second = _write_png(tmp_path / "2.png", [(2, 2, 2, 255), (2, 2, 2, 255)])
    manager.load_texture("id", first)
    manager.load_texture("id", second)
    assert manager.get_texture("id").size == (1, 1)
    assert manager.loaded_texture_count == 1


def test_unload(manager, tmp_path):
    path = _write_png(tmp_path / "a.png", [(1, 1, 1, 255)])
    manager.load_texture("a", path)
    manager.load_texture("b", path)
    manager.unload_texture("a")
    manager.unload_texture("missing")
    assert not manager.has_texture("a")
    assert manager.loaded_texture_count == 1
    manager.unload_all_textures()
    assert manager.loaded_texture_count == 0


def test_singleton_and_shutdown(tmp_path):
    TextureManager.shutdown()
    first = TextureManager.get_instance()
    assert TextureManager.get_instance() is first
    first.load_texture("a", _write_png(tmp_path / "a.png", [(1, 1, 1, 255)]))
    TextureManager.shutdown()
    assert first.loaded_texture_count == 0
    second = TextureManager.get_instance()
    assert second is not first
    assert second.loaded_texture_count == 0
    TextureManager.shutdown()


def test_load_all_game_textures(manager, tmp_path, monkeypatch):
    for name in _ALL_FILES:
        _write_png(tmp_path / name, [(255, 255, 255, 255)])
    monkeypatch.chdir(tmp_path)
    manager.load_all_game_textures()
    assert manager.loaded_texture_count == len(_ALL_FILES)
    # opaque screens keep white, sprites lose it
    assert manager.get_texture("youwin").image.getpixel((0, 0)) == (255, 255, 255, 255)
    assert manager.get_texture("traffic_cone").image.getpixel((0, 0)) == (0, 0, 0, 0)


def test_load_all_game_textures_missing_file(manager, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(ResourceNotFoundException):
        manager.load_all_game_textures()