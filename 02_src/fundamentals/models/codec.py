"""JSON codec for recordings.

Wire format (compatible with the web viewer):

    Recording   {"name": str, "session_id": str, "vizs": [Viz, ...]}
    Viz         {"name": str, "source": str|null, "widgets": [Widget, ...],
                 "range": [lo, hi]|null}
    Widget      {"plot_scalar": {"data_x": [[x, y], ...]}}
              | {"3d_view": {"primatives": [[t, Primitive], ...]}}
    Primitive   {"Point": [[x, y, z], ...]}

Variants are externally tagged: an object with exactly one key naming the
variant. Decoding errors carry the field path of the offending value.
"""

import json
import math
from typing import Any

from ..errors import DecodeError, EncodeError
from .recording import Recording
from .viz import Viz
from .widgets import PlotScalar, PointCloud, ThreeDPrimitive, ThreeDView, Widget

PLOT_SCALAR_TAG = "plot_scalar"
THREE_D_VIEW_TAG = "3d_view"
POINT_TAG = "Point"


def _key(path: str, name: str) -> str:
    return f"{path}.{name}" if path else name


def _index(path: str, i: int) -> str:
    return f"{path}[{i}]"


# Encoding


def _encode_number(value: float, path: str) -> float:
    number = float(value)
    if not math.isfinite(number):
        raise EncodeError(path, f"non-finite number {number!r}")
    return number


def _encode_tuple(values: tuple, path: str) -> list[float]:
    return [_encode_number(v, _index(path, i)) for i, v in enumerate(values)]


def encode_primitive(primitive: ThreeDPrimitive, path: str = "") -> dict[str, Any]:
    """Encode a spatial primitive."""
    if isinstance(primitive, PointCloud):
        points_path = _key(path, POINT_TAG)
        return {
            POINT_TAG: [
                _encode_tuple(p, _index(points_path, i))
                for i, p in enumerate(primitive.points)
            ]
        }
    raise TypeError(f"Unknown spatial primitive: {type(primitive).__name__}")


def encode_widget(widget: Widget, path: str = "") -> dict[str, Any]:
    """Encode a widget as a tagged object."""
    if isinstance(widget, PlotScalar):
        data_path = _key(_key(path, PLOT_SCALAR_TAG), "data_x")
        return {
            PLOT_SCALAR_TAG: {
                "data_x": [
                    _encode_tuple(sample, _index(data_path, i))
                    for i, sample in enumerate(widget.data_x)
                ]
            }
        }
    if isinstance(widget, ThreeDView):
        entries_path = _key(_key(path, THREE_D_VIEW_TAG), "primatives")
        entries = []
        for i, (timestamp, primitive) in enumerate(widget.primitives):
            entry_path = _index(entries_path, i)
            entries.append(
                [
                    _encode_number(timestamp, _index(entry_path, 0)),
                    encode_primitive(primitive, _index(entry_path, 1)),
                ]
            )
        return {THREE_D_VIEW_TAG: {"primatives": entries}}
    raise TypeError(f"Unknown widget: {type(widget).__name__}")


def encode_viz(viz: Viz, path: str = "") -> dict[str, Any]:
    """Encode a Viz."""
    widgets_path = _key(path, "widgets")
    return {
        "name": viz.name,
        "source": viz.source,
        "widgets": [
            encode_widget(w, _index(widgets_path, i))
            for i, w in enumerate(viz.widgets)
        ],
        "range": (
            _encode_tuple(viz.range, _key(path, "range"))
            if viz.range is not None
            else None
        ),
    }


def encode_recording(recording: Recording) -> dict[str, Any]:
    """Encode a Recording."""
    return {
        "name": recording.name,
        "session_id": recording.session_id,
        "vizs": [
            encode_viz(v, _index("vizs", i)) for i, v in enumerate(recording.vizs)
        ],
    }


def recording_to_json(recording: Recording) -> str:
    """Serialize a Recording to JSON text."""
    return json.dumps(encode_recording(recording), allow_nan=False)


# Decoding


def _expect_object(value: Any, path: str) -> dict:
    if not isinstance(value, dict):
        raise DecodeError(path, f"expected object, got {type(value).__name__}")
    return value


def _expect_list(value: Any, path: str) -> list:
    if not isinstance(value, list):
        raise DecodeError(path, f"expected array, got {type(value).__name__}")
    return value


def _expect_str(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise DecodeError(path, f"expected string, got {type(value).__name__}")
    return value


def _expect_number(value: Any, path: str) -> float:
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DecodeError(path, f"expected number, got {type(value).__name__}")
    try:
        number = float(value)
    except OverflowError:
        raise DecodeError(path, "number out of float64 range")
    if not math.isfinite(number):
        raise DecodeError(path, f"non-finite number {number!r}")
    return number


def _expect_tuple(value: Any, path: str, arity: int) -> tuple:
    items = _expect_list(value, path)
    if len(items) != arity:
        raise DecodeError(path, f"expected {arity} numbers, got {len(items)}")
    return tuple(_expect_number(v, _index(path, i)) for i, v in enumerate(items))


def _require(obj: dict, name: str, path: str) -> Any:
    if name not in obj:
        raise DecodeError(_key(path, name), "missing required field")
    return obj[name]


def _expect_tagged(value: Any, path: str) -> tuple[str, Any]:
    obj = _expect_object(value, path)
    if len(obj) != 1:
        raise DecodeError(
            path, f"expected exactly one variant tag, got {sorted(obj)!r}"
        )
    ((tag, body),) = obj.items()
    return tag, body


def decode_primitive(value: Any, path: str = "") -> ThreeDPrimitive:
    """Decode a spatial primitive."""
    tag, body = _expect_tagged(value, path)
    if tag == POINT_TAG:
        points_path = _key(path, POINT_TAG)
        return PointCloud(
            points=[
                _expect_tuple(p, _index(points_path, i), 3)
                for i, p in enumerate(_expect_list(body, points_path))
            ]
        )
    raise DecodeError(path, f"unknown spatial primitive {tag!r}")


def decode_widget(value: Any, path: str = "") -> Widget:
    """Decode a tagged widget object."""
    tag, body = _expect_tagged(value, path)
    if tag == PLOT_SCALAR_TAG:
        body_path = _key(path, PLOT_SCALAR_TAG)
        data_path = _key(body_path, "data_x")
        samples = _expect_list(
            _require(_expect_object(body, body_path), "data_x", body_path), data_path
        )
        return PlotScalar(
            data_x=[
                _expect_tuple(s, _index(data_path, i), 2)
                for i, s in enumerate(samples)
            ]
        )
    if tag == THREE_D_VIEW_TAG:
        body_path = _key(path, THREE_D_VIEW_TAG)
        entries_path = _key(body_path, "primatives")
        entries = _expect_list(
            _require(_expect_object(body, body_path), "primatives", body_path),
            entries_path,
        )
        primitives = []
        for i, entry in enumerate(entries):
            entry_path = _index(entries_path, i)
            pair = _expect_list(entry, entry_path)
            if len(pair) != 2:
                raise DecodeError(
                    entry_path, f"expected [timestamp, primitive], got {len(pair)} items"
                )
            primitives.append(
                (
                    _expect_number(pair[0], _index(entry_path, 0)),
                    decode_primitive(pair[1], _index(entry_path, 1)),
                )
            )
        return ThreeDView(primitives=primitives)
    raise DecodeError(path, f"unknown widget {tag!r}")


def decode_viz(value: Any, path: str = "") -> Viz:
    """Decode a Viz. Missing `source` / `range` decode as None."""
    obj = _expect_object(value, path)
    name = _expect_str(_require(obj, "name", path), _key(path, "name"))

    source = obj.get("source")
    if source is not None:
        source = _expect_str(source, _key(path, "source"))

    widgets_path = _key(path, "widgets")
    widgets = [
        decode_widget(w, _index(widgets_path, i))
        for i, w in enumerate(
            _expect_list(_require(obj, "widgets", path), widgets_path)
        )
    ]

    range_ = obj.get("range")
    if range_ is not None:
        range_ = _expect_tuple(range_, _key(path, "range"), 2)

    return Viz(name=name, source=source, widgets=widgets, range=range_)


def decode_recording(value: Any) -> Recording:
    """Decode a Recording."""
    obj = _expect_object(value, "")
    name = _expect_str(_require(obj, "name", ""), "name")
    session_id = _expect_str(_require(obj, "session_id", ""), "session_id")
    vizs = [
        decode_viz(v, _index("vizs", i))
        for i, v in enumerate(_expect_list(_require(obj, "vizs", ""), "vizs"))
    ]
    return Recording(name=name, session_id=session_id, vizs=vizs)


def _reject_constant(constant: str) -> float:
    raise DecodeError("", f"non-finite number {constant}")


def parse_json(text: str | bytes) -> Any:
    """Parse JSON text strictly (no NaN/Infinity), raising DecodeError."""
    try:
        return json.loads(text, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise DecodeError("", f"invalid JSON at line {e.lineno} column {e.colno}: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise DecodeError("", f"invalid UTF-8: {e}") from e
    except RecursionError as e:
        raise DecodeError("", "structure nested too deeply") from e


def recording_from_json(text: str | bytes) -> Recording:
    """Deserialize a Recording from JSON text."""
    return decode_recording(parse_json(text))
