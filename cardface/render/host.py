"""The renderable-node interface a host UI provides to the card widget."""

from typing import Mapping, Optional, Protocol


class RenderNode(Protocol):
    """A node in a DOM-like tree."""

    parent: Optional["RenderNode"]
    class_name: str

    def append_text(self, text: str) -> None:
        """Append a text child."""

    def append_child(self, child: "RenderNode") -> None:
        """Append an element child."""

    def remove_child(self, child: "RenderNode") -> None:
        """Remove a child from this node."""


class RenderHost(Protocol):
    """Creates nodes for a render tree."""

    def create_element(
        self,
        tag: str,
        style: Optional[Mapping[str, str]] = None,
    ) -> RenderNode:
        """Create an element node of a tag with optional inline style."""


def detach(node: RenderNode) -> None:
    """Remove a node from its parent, if it has one."""
    if node.parent is not None:
        node.parent.remove_child(node)
