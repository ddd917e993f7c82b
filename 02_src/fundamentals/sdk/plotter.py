"""Scalar plot helper."""

from ..models import PlotScalar, Recording, Viz


class Plotter:
    """Accumulates (x, y) points into a scalar-series Viz."""

    def __init__(self, name: str):
        self.name = name
        self.points_x: list[float] = []
        self.points_y: list[float] = []

    def add_point(self, x: float, y: float) -> None:
        self.points_x.append(x)
        self.points_y.append(y)

    def as_scalar_data(self) -> PlotScalar:
        return PlotScalar(data_x=list(zip(self.points_x, self.points_y)))

    def as_viz(self) -> Viz:
        return Viz(self.name).with_widget(self.as_scalar_data())

    def log(self, recording: Recording) -> None:
        """Append this plot to a recording."""
        recording.add_viz(self.as_viz())
