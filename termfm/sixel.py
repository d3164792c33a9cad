"""Images in the DEC sixel graphics format."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from itertools import groupby

from PIL import Image

_END = "\x1b\\"


def _has_alpha(image: Image.Image) -> bool:
    return "A" in image.getbands() or "transparency" in image.info


def _rows(values: Sequence[int], width: int) -> Iterator[Sequence[int]]:
    for start in range(0, len(values), width):
        yield values[start : start + width]


def encode(image: Image.Image) -> bytes:
    """Sixel escape sequence that draws ``image`` at the cursor.

    Fully transparent pixels use colour register 0, which is left undefined.
    """
    if image.width == 0 or image.height == 0:
        raise ValueError("image is empty")

    alpha = int(_has_alpha(image))
    rgba = image.convert("RGBA")
    colors = 256 - alpha
    quantized = rgba.convert("RGB").quantize(
        colors=colors, method=Image.Quantize.MEDIANCUT, dither=Image.Dither.NONE
    )

    out = [f'\x1bP0;1;8q"1;1;{rgba.width};{rgba.height}']

    palette = (quantized.getpalette() or [])[: colors * 3]
    for register, (r, g, b) in enumerate(
        zip(palette[0::3], palette[1::3], palette[2::3]), start=alpha
    ):
        out.append(f"#{register};2;{r * 100 // 255};{g * 100 // 255};{b * 100 // 255}")

    indices = [
        0 if a == 0 else index + alpha
        for index, a in zip(quantized.getdata(), rgba.getchannel("A").getdata())
    ]
    for y, row in enumerate(_rows(indices, rgba.width)):
        band = chr(ord("?") + (1 << (y % 6)))
        for register, run in groupby(row):
            count = sum(1 for _ in run)
            if count > 1:
                out.append(f"#{register}!{count}{band}")
            else:
                out.append(f"#{register}{band}")
        out.append("$")
        if y % 6 == 5:
            out.append("-")

    out.append(_END)
    return "".join(out).encode("ascii")