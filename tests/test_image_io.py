import pytest
from PIL import Image

from image_io import ImageLoadError, ImageSaveError, grid_to_image, image_to_grid, load_grid, save_grid
from transforms import InvalidInput


def test_load_grid_reads_rgb_rows(png_path):
    grid = load_grid(png_path)
    assert grid == [
        [(10, 20, 30), (40, 50, 60), (70, 80, 90)],
        [(100, 110, 120), (130, 140, 150), (160, 170, 180)],
    ]
    assert all(isinstance(c, int) for c in grid[0][0])


def test_load_grid_converts_grayscale(tmp_path):
    path = tmp_path / "gray.bmp"
    Image.new("L", (2, 3), 77).save(path)
    grid = load_grid(path)
    assert len(grid) == 3 and len(grid[0]) == 2
    assert grid[2][1] == (77, 77, 77)


def test_load_grid_drops_alpha(tmp_path):
    path = tmp_path / "alpha.png"
    Image.new("RGBA", (1, 1), (5, 6, 7, 0)).save(path)
    assert load_grid(path) == [[(5, 6, 7)]]


def test_load_grid_missing_file(tmp_path):
    with pytest.raises(ImageLoadError, match="missing.png"):
        load_grid(tmp_path / "missing.png")


def test_load_grid_not_an_image(tmp_path):
    path = tmp_path / "notes.png"
    path.write_text("this is not a png")
    with pytest.raises(ImageLoadError) as info:
        load_grid(path)
    assert isinstance(info.value.__cause__, OSError)


def test_save_then_load_png(tmp_path, gradient_grid):
    path = save_grid(gradient_grid, tmp_path / "out.png")
    assert path.exists()
    assert load_grid(path) == gradient_grid


def test_save_grid_unknown_extension(tmp_path, gradient_grid):
    with pytest.raises(ImageSaveError):
        save_grid(gradient_grid, tmp_path / "out.nope")


def test_grid_to_image_size_and_mode(gradient_grid):
    img = grid_to_image(gradient_grid)
    assert img.mode == "RGB"
    assert img.size == (7, 5)
    assert img.getpixel((3, 2)) == gradient_grid[2][3]
    assert image_to_grid(img) == gradient_grid


def test_grid_to_image_rejects_empty_grid():
    with pytest.raises(InvalidInput):
        grid_to_image([])


def test_load_grid_oversized_image(monkeypatch, png_path):
    # 6 pixels is more than twice the limit, so Pillow refuses to decode
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 2)
    with pytest.raises(ImageLoadError) as info:
        load_grid(png_path)
    assert isinstance(info.value.__cause__, Image.DecompressionBombError)
