"""Render tree primitives."""

from cardface.render.host import RenderHost, RenderNode, detach
from cardface.render.tree import Element, Text, TreeHost

__all__ = [
    "RenderHost",
    "RenderNode",
    "detach",
    "Element",
    "Text",
    "TreeHost",
]
