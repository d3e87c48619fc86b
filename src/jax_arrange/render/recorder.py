"""In-memory renderer that keeps every placement as data."""

from dataclasses import dataclass, field
from typing import Any, List, Mapping, NamedTuple, Optional

import jax

Array = jax.Array

CHILD = "child"


class RenderEvent(NamedTuple):
    """One call received by a RecordingRenderer.

    `kind` is "child" for render_child_at, otherwise the primitive kind.
    `index` is None for primitives, `label` is None for children.
    """
    kind: str
    index: Optional[int]
    matrix: Array
    params: Mapping[str, Any]
    label: Optional[str]


@dataclass
class RecordingRenderer:
    """Renderer that records calls in order instead of drawing them."""
    num_children: int = 0
    events: List[RenderEvent] = field(default_factory=list)
    count_queries: int = 0

    def child_count(self) -> int:
        self.count_queries += 1
        return self.num_children

    def render_child_at(self, index: int, matrix: Array) -> None:
        if not 0 <= index < self.num_children:
            raise IndexError(f"child index {index} out of range for {self.num_children} children")
        self.events.append(RenderEvent(CHILD, index, matrix, {}, None))

    def render_primitive(self, kind: str, params: Mapping[str, Any], matrix: Array, label: str) -> None:
        self.events.append(RenderEvent(kind, None, matrix, dict(params), label))

    # Convenience helpers
    def children(self) -> List[RenderEvent]:
        return [e for e in self.events if e.kind == CHILD]

    def primitives(self, kind: Optional[str] = None) -> List[RenderEvent]:
        return [e for e in self.events if e.kind != CHILD and (kind is None or e.kind == kind)]
