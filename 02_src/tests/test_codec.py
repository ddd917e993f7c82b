"""Tests for the recording JSON codec."""

import json
import math

import pytest

from fundamentals.errors import DecodeError, EncodeError
from fundamentals.models import (
    PlotScalar,
    PointCloud,
    Recording,
    ThreeDView,
    Viz,
    decode_recording,
    decode_viz,
    decode_widget,
    encode_recording,
    encode_widget,
    recording_from_json,
    recording_to_json,
)


def _recording_with_widget(widget: dict) -> dict:
    return {
        "name": "r",
        "session_id": "s",
        "vizs": [{"name": "v", "source": None, "widgets": [widget], "range": None}],
    }


class TestRoundTrip:
    """decode(encode(x)) == x."""

    def test_full_recording(self, full_recording):
        """Test round trip through JSON text for every widget kind."""
        assert recording_from_json(recording_to_json(full_recording)) == full_recording

    def test_empty_recording(self):
        """Test round trip with zero vizs."""
        recording = Recording(name="", session_id="s")
        assert decode_recording(encode_recording(recording)) == recording

    def test_viz_without_widgets_or_optionals(self):
        """Test round trip with zero widgets and absent source/range."""
        recording = Recording(name="r", session_id="s", vizs=[Viz(name="v")])
        decoded = recording_from_json(recording_to_json(recording))
        assert decoded == recording
        assert decoded.vizs[0].source is None
        assert decoded.vizs[0].range is None


class TestWireFormat:
    """The encoded shape matches what the web viewer reads."""

    def test_two_viz_recording_shape(self, two_viz_recording):
        """Test exact encoded structure of a recording."""
        assert encode_recording(two_viz_recording) == {
            "name": "scenario",
            "session_id": "session-1",
            "vizs": [
                {
                    "name": "A",
                    "source": None,
                    "widgets": [{"plot_scalar": {"data_x": [[0.0, 0.0], [1.0, 1.0]]}}],
                    "range": None,
                },
                {"name": "B", "source": None, "widgets": [], "range": None},
            ],
        }

    def test_three_d_view_shape(self):
        """Test externally tagged 3d_view and Point encoding."""
        widget = ThreeDView(primitives=[(0.5, PointCloud(points=[(1.0, 2.0, 3.0)]))])
        assert encode_widget(widget) == {
            "3d_view": {"primatives": [[0.5, {"Point": [[1.0, 2.0, 3.0]]}]]}
        }

    def test_range_encoded_as_pair(self):
        """Test that range encodes as a two-element array."""
        recording = Recording(
            name="r", session_id="s", vizs=[Viz(name="v", range=(0.0, 5.0))]
        )
        assert json.loads(recording_to_json(recording))["vizs"][0]["range"] == [0.0, 5.0]

    def test_integers_accepted_as_numbers(self):
        """Test that JSON integers decode as floats."""
        widget = decode_widget({"plot_scalar": {"data_x": [[0, 1]]}})
        assert widget == PlotScalar(data_x=[(0.0, 1.0)])
        assert isinstance(widget.data_x[0][0], float)


class TestDecodeOptionalFields:
    """Absent optionals decode as None; unknown keys are ignored."""

    def test_missing_source_and_range(self):
        """Test a Viz object without source/range keys."""
        viz = decode_viz({"name": "v", "widgets": []})
        assert viz == Viz(name="v")

    def test_extra_keys_ignored(self):
        """Test that unknown object keys are ignored."""
        data = {"name": "r", "session_id": "s", "vizs": [], "created": "today"}
        assert decode_recording(data) == Recording(name="r", session_id="s")


class TestDecodeErrors:
    """Malformed input fails with DecodeError naming the field path."""

    def test_missing_vizs(self):
        """Test that a root without vizs is rejected, not defaulted."""
        with pytest.raises(DecodeError) as exc_info:
            recording_from_json('{"name": "r", "session_id": "s"}')
        assert exc_info.value.path == "vizs"

    def test_root_not_object(self):
        """Test a non-object root."""
        with pytest.raises(DecodeError):
            recording_from_json("[]")

    def test_unknown_widget_tag(self):
        """Test that unknown widget variants are a hard error."""
        with pytest.raises(DecodeError) as exc_info:
            decode_recording(_recording_with_widget({"bar_chart": {}}))
        assert exc_info.value.path == "vizs[0].widgets[0]"
        assert "bar_chart" in exc_info.value.reason

    def test_unknown_primitive_tag(self):
        """Test that unknown spatial primitives are a hard error."""
        widget = {"3d_view": {"primatives": [[0.0, {"Mesh": []}]]}}
        with pytest.raises(DecodeError) as exc_info:
            decode_recording(_recording_with_widget(widget))
        assert exc_info.value.path == "vizs[0].widgets[0].3d_view.primatives[0][1]"

    def test_multiple_tags(self):
        """Test that a widget object must carry exactly one tag."""
        with pytest.raises(DecodeError):
            decode_widget({"plot_scalar": {"data_x": []}, "3d_view": {"primatives": []}})

    def test_malformed_number(self):
        """Test that a string in a numeric field is rejected."""
        widget = {"plot_scalar": {"data_x": [[0, 0], [1, "1"]]}}
        with pytest.raises(DecodeError) as exc_info:
            decode_recording(_recording_with_widget(widget))
        assert exc_info.value.path == "vizs[0].widgets[0].plot_scalar.data_x[1][1]"

    def test_bool_is_not_a_number(self):
        """Test that booleans are rejected in numeric fields."""
        with pytest.raises(DecodeError):
            decode_widget({"plot_scalar": {"data_x": [[True, 0]]}})

    def test_wrong_arity(self):
        """Test that a point with two coordinates is rejected."""
        widget = {"3d_view": {"primatives": [[0.0, {"Point": [[1, 2]]}]]}}
        with pytest.raises(DecodeError) as exc_info:
            decode_widget(widget, "w")
        assert exc_info.value.path == "w.3d_view.primatives[0][1].Point[0]"

    def test_missing_data_x(self):
        """Test a plot_scalar body without data_x."""
        with pytest.raises(DecodeError) as exc_info:
            decode_widget({"plot_scalar": {}})
        assert exc_info.value.path == "plot_scalar.data_x"

    def test_wrong_source_type(self):
        """Test a non-string source."""
        data = {"name": "r", "session_id": "s", "vizs": [{"name": "v", "source": 3, "widgets": []}]}
        with pytest.raises(DecodeError) as exc_info:
            decode_recording(data)
        assert exc_info.value.path == "vizs[0].source"

    def test_non_finite_constant(self):
        """Test that NaN/Infinity JSON extensions are rejected."""
        with pytest.raises(DecodeError):
            recording_from_json(
                '{"name": "r", "session_id": "s", "vizs": [{"name": "v", '
                '"widgets": [{"plot_scalar": {"data_x": [[0, NaN]]}}]}]}'
            )

    def test_truncated_text(self):
        """Test that truncated JSON fails with DecodeError."""
        with pytest.raises(DecodeError) as exc_info:
            recording_from_json('{"name": "r", "session_id": ')
        assert "invalid JSON" in exc_info.value.reason


class TestEncodeErrors:
    """Non-finite floats are rejected at encode time."""

    def test_nan_sample(self):
        """Test that NaN in a series names its path."""
        recording = Recording(
            name="r",
            session_id="s",
            vizs=[Viz(name="v", widgets=[PlotScalar(data_x=[(0.0, math.nan)])])],
        )
        with pytest.raises(EncodeError) as exc_info:
            recording_to_json(recording)
        assert exc_info.value.path == "vizs[0].widgets[0].plot_scalar.data_x[0][1]"

    def test_infinite_timestamp(self):
        """Test that an infinite timestamp is rejected."""
        widget = ThreeDView(primitives=[(math.inf, PointCloud())])
        with pytest.raises(EncodeError):
            encode_widget(widget)

    def test_unknown_widget_type(self):
        """Test that a non-widget value is a TypeError."""
        with pytest.raises(TypeError):
            encode_widget("not a widget")  # type: ignore[arg-type]
