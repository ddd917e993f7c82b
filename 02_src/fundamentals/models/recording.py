"""Recording model."""

import uuid
from dataclasses import dataclass, field

from .viz import Viz


@dataclass
class Recording:
    """One capture session: an append-only list of Vizs."""

    name: str
    session_id: str
    vizs: list[Viz] = field(default_factory=list)

    @classmethod
    def new(cls, name: str) -> "Recording":
        """Start a recording with a fresh session id."""
        return cls(name=name, session_id=str(uuid.uuid4()))

    def add_viz(self, viz: Viz) -> None:
        """Append a Viz."""
        self.vizs.append(viz)
