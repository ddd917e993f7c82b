"""Widget payload models."""

from dataclasses import dataclass, field
from typing import Union


@dataclass
class PlotScalar:
    """A scalar series: (x, y) samples rendered in the order given."""

    data_x: list[tuple[float, float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.data_x = [(x, y) for x, y in self.data_x]


@dataclass
class PointCloud:
    """A set of (x, y, z) points."""

    points: list[tuple[float, float, float]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.points = [(x, y, z) for x, y, z in self.points]


# Closed set of spatial primitives. Add new kinds here and in models.codec.
ThreeDPrimitive = Union[PointCloud]


@dataclass
class ThreeDView:
    """A spatial timeline: (timestamp, primitive) entries.

    Entries may share a timestamp and are kept in insertion order; producers
    should append in non-decreasing timestamp order.
    """

    primitives: list[tuple[float, ThreeDPrimitive]] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.primitives = [(t, primitive) for t, primitive in self.primitives]


# Closed set of widget kinds. Add new kinds here and in models.codec.
Widget = Union[PlotScalar, ThreeDView]
