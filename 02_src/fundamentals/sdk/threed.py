"""3D point timeline helper."""

from ..models import PointCloud, Recording, ThreeDPrimitive, ThreeDView, Viz


class ThreeDPlotter:
    """Accumulates timestamped point clouds into a 3D-view Viz."""

    def __init__(self, name: str):
        self.name = name
        self._primitives: list[tuple[float, ThreeDPrimitive]] = []

    def add_points(self, points: list[tuple[float, float, float]], time: float) -> None:
        """Add a point cloud at `time` (seconds)."""
        self._primitives.append((time, PointCloud(points=points)))

    def as_view_data(self) -> ThreeDView:
        return ThreeDView(primitives=list(self._primitives))

    def as_viz(self) -> Viz:
        return Viz(self.name).with_widget(self.as_view_data())

    def log(self, recording: Recording) -> None:
        """Append this view to a recording."""
        recording.add_viz(self.as_viz())
