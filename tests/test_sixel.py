import pytest
from PIL import Image

from termfm.sixel import encode


def test_header_and_terminator():
    img = Image.new("RGB", (3, 2), (255, 0, 0))
    out = encode(img)
    assert out.startswith(b'\x1bP0;1;8q"1;1;3;2')
    assert out.endswith(b"\x1b\\")


def test_solid_colour_row_is_run_length_encoded():
    img = Image.new("RGB", (2, 1), (255, 0, 0))
    out = encode(img)
    assert b"#0;2;100;0;0" in out
    assert b"#0!2@$" in out


def test_one_row_terminator_per_pixel_row():
    img = Image.new("RGB", (4, 13), (0, 128, 0))
    out = encode(img)
    body = out.split(b'"1;1;4;13', 1)[1]
    assert body.count(b"$") == 13
    assert body.count(b"-") == 13 // 6


def test_transparent_pixels_use_register_zero():
    img = Image.new("RGBA", (2, 1), (0, 0, 255, 255))
    img.putpixel((0, 0), (0, 0, 255, 0))
    out = encode(img)
    assert b"#1;2;0;0;100" in out
    assert b"#0@#1@$" in out


def test_palette_registers_start_after_transparent_slot():
    img = Image.new("RGBA", (1, 1), (0, 0, 255, 255))
    out = encode(img)
    assert b"#0;2;" not in out


def test_empty_image_is_rejected():
    with pytest.raises(ValueError):
        encode(Image.new("RGB", (0, 0)))