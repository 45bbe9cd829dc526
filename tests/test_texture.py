import pytest

from minycraft.texture import GL_RED, GL_RGB, GL_RGBA, Texture, TextureError, pixel_format


@pytest.mark.parametrize("channels, expected", [(1, GL_RED), (3, GL_RGB), (4, GL_RGBA)])
def test_pixel_format_supported(channels, expected):
    assert pixel_format(channels) == expected


def test_rgba_is_the_gl_constant():
    assert pixel_format(4) == 0x1908


def test_formats_are_distinct():
    assert len({pixel_format(c) for c in (1, 3, 4)}) == 3


@pytest.mark.parametrize("channels", [0, 2, 5])
def test_pixel_format_unsupported(channels):
    with pytest.raises(TextureError, match="channels"):
        pixel_format(channels)


def test_missing_image_raises(tmp_path):
    with pytest.raises(TextureError, match="Failed to locate image"):
        Texture(tmp_path / "atlas.png")


def test_directory_is_not_an_image(tmp_path):
    with pytest.raises(TextureError):
        Texture(tmp_path)