"""Images in the iTerm2 inline image protocol."""

from __future__ import annotations

import base64
import io

from PIL import Image

_QUALITY = 75


def encode(image: Image.Image) -> bytes:
    """Escape sequence that draws ``image`` as an inline JPEG at the cursor."""
    if image.mode not in ("RGB", "L"):
        image = image.convert("RGB")
    buf = io.BytesIO()
    image.save(buf, format="JPEG", quality=_QUALITY)
    jpg = buf.getvalue()
    width, height = image.size
    return (
        f"\x1b]1337;File=inline=1;size={len(jpg)};width={width}px;height={height}px;"
        f"doNotMoveCursor=1:{base64.b64encode(jpg).decode('ascii')}\x07"
    ).encode("ascii")