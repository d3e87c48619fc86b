"""The rendering collaborator interface used by the applicators."""

from typing import Any, Mapping, Protocol

import jax

Array = jax.Array


class Renderer(Protocol):
    """Capability object that owns the children and draws primitives.

    The applicators never create or destroy children; they only ask how
    many there are and hand one matrix per rendered entity to the renderer.
    """

    def child_count(self) -> int:
        """Number of children in the current rendering scope."""
        ...

    def render_child_at(self, index: int, matrix: Array) -> None:
        """Apply `matrix` to child `index` and emit it. May be called
        repeatedly for the same index."""
        ...

    def render_primitive(self, kind: str, params: Mapping[str, Any], matrix: Array, label: str) -> None:
        """Emit a primitive solid (e.g. "cylinder", "sphere") with the given
        parameters, transform and label/colour."""
        ...
