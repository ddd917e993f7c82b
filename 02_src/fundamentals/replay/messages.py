"""Streaming protocol messages.

Only one message kind exists, sent server -> client as a whole text frame:

    {"VizUpdate": <encoded Viz>}
"""

import json

from ..errors import DecodeError
from ..models import Viz
from ..models.codec import decode_viz, encode_viz, parse_json

VIZ_UPDATE = "VizUpdate"


def encode_viz_update(viz: Viz) -> str:
    """Build the text frame for one Viz."""
    return json.dumps({VIZ_UPDATE: encode_viz(viz, VIZ_UPDATE)}, allow_nan=False)


def decode_viz_update(text: str | bytes) -> Viz:
    """Parse a VizUpdate frame (viewer side)."""
    message = parse_json(text)
    if not isinstance(message, dict) or list(message) != [VIZ_UPDATE]:
        raise DecodeError("", f"expected a single {VIZ_UPDATE!r} message")
    return decode_viz(message[VIZ_UPDATE], VIZ_UPDATE)
