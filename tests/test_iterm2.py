import base64
import io
import re

import pytest
from PIL import Image

from termfm.iterm2 import encode

_SEQ = re.compile(
    rb"\x1b\]1337;File=inline=1;size=(\d+);width=(\d+)px;height=(\d+)px;"
    rb"doNotMoveCursor=1:([A-Za-z0-9+/=]*)\x07"
)


@pytest.mark.parametrize("mode", ["RGB", "RGBA", "L", "P"])
def test_encode_layout(mode):
    img = Image.new(mode, (7, 5))
    match = _SEQ.fullmatch(encode(img))
    assert match is not None
    jpg = base64.b64decode(match.group(4))
    assert int(match.group(1)) == len(jpg)
    assert (int(match.group(2)), int(match.group(3))) == img.size
    with Image.open(io.BytesIO(jpg)) as decoded:
        assert decoded.format == "JPEG"
        assert decoded.size == img.size


def test_encode_starts_with_protocol_prefix():
    out = encode(Image.new("RGB", (1, 1)))
    assert out.startswith(b"\x1b]1337;File=inline=1;")
    assert out.endswith(b"\x07")