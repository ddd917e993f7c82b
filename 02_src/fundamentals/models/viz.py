"""Viz model."""

from dataclasses import dataclass, field

from .widgets import Widget


@dataclass
class Viz:
    """One named visualization unit.

    Widgets may only be appended; the other fields are set at construction.
    `range` is a display hint and is never used for validation or filtering.
    """

    name: str
    source: str | None = None
    widgets: list[Widget] = field(default_factory=list)
    range: tuple[float, float] | None = None

    def __post_init__(self) -> None:
        self.widgets = list(self.widgets)
        if self.range is not None:
            lo, hi = self.range
            self.range = (lo, hi)

    def add_widget(self, widget: Widget) -> None:
        """Append a widget."""
        self.widgets.append(widget)

    def with_widget(self, widget: Widget) -> "Viz":
        """Append a widget and return self for chaining."""
        self.widgets.append(widget)
        return self
