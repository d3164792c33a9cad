"""Images in the kitty terminal graphics protocol."""

from __future__ import annotations

import base64
import sys
from typing import BinaryIO

from PIL import Image

_CHUNK = 4096
_HIDE = b"\x1b\\\x1b_Ga=d\x1b\\"


def _output(raw: bytes, fmt: int, size: tuple[int, int]) -> bytes:
    b64 = base64.b64encode(raw)
    chunks = [b64[i : i + _CHUNK] for i in range(0, len(b64), _CHUNK)]
    out = bytearray()
    last = len(chunks) - 1
    for index, chunk in enumerate(chunks):
        more = int(index < last)
        if index == 0:
            head = f"\x1b_Ga=T,f={fmt},s={size[0]},v={size[1]},m={more};"
        else:
            head = f"\x1b_Gm={more};"
        out += head.encode("ascii") + chunk + b"\x1b\\"
    return bytes(out)


def encode(image: Image.Image) -> bytes:
    """Escape sequences that draw ``image`` at the cursor."""
    if image.mode == "RGB":
        return _output(image.tobytes(), 24, image.size)
    if image.mode == "RGBA":
        return _output(image.tobytes(), 32, image.size)
    return _output(image.convert("RGB").tobytes(), 24, image.size)


def hide(stream: BinaryIO | None = None) -> None:
    """Delete every image drawn on the terminal."""
    stream = sys.stdout.buffer if stream is None else stream
    stream.write(_HIDE)
    stream.flush()