"""In-memory DOM-like render tree."""

from html import escape
from typing import Iterator, Mapping, Optional

VOID_TAGS = frozenset({"br", "hr", "img"})


class Text:
    """A text leaf."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.parent: Optional["Element"] = None

    def __repr__(self) -> str:
        return f"Text({self.text!r})"

    def to_html(self) -> str:
        return escape(self.text)


class Element:
    """An element node with hook classes, inline style and ordered children."""

    def __init__(self, tag: str, style: Optional[Mapping[str, str]] = None) -> None:
        self.tag = tag.lower()
        self.style: dict[str, str] = dict(style or {})
        self.class_name = ""
        self.parent: Optional["Element"] = None
        self.children: list["Element | Text"] = []

    def __repr__(self) -> str:
        return f"Element({self.tag!r}, class_name={self.class_name!r})"

    @property
    def classes(self) -> list[str]:
        """Return the hook classes as a list."""
        return self.class_name.split()

    def has_class(self, name: str) -> bool:
        """Check if the element carries a hook class."""
        return name in self.classes

    def append_text(self, text: str) -> None:
        """Append a text child."""
        node = Text(text)
        node.parent = self
        self.children.append(node)

    def append_child(self, child: "Element | Text") -> None:
        """Append a child, moving it out of its current parent first."""
        if child is self:
            raise ValueError("Cannot append an element to itself")
        if child.parent is not None:
            child.parent.remove_child(child)
        child.parent = self
        self.children.append(child)

    def remove_child(self, child: "Element | Text") -> None:
        """Remove a child from this element."""
        if child.parent is not self:
            raise ValueError(f"{child!r} is not a child of {self!r}")
        self.children.remove(child)
        child.parent = None

    @property
    def elements(self) -> list["Element"]:
        """Return the element children, skipping text."""
        return [c for c in self.children if isinstance(c, Element)]

    @property
    def text_content(self) -> str:
        """Return the concatenated text of this subtree."""
        parts = []
        for child in self.children:
            if isinstance(child, Text):
                parts.append(child.text)
            else:
                parts.append(child.text_content)
        return "".join(parts)

    def iter(self) -> Iterator["Element"]:
        """Iterate over this element and its element descendants, depth first."""
        yield self
        for child in self.elements:
            yield from child.iter()

    def find_all(self, class_name: str) -> list["Element"]:
        """Return every element in this subtree carrying a hook class."""
        return [e for e in self.iter() if e.has_class(class_name)]

    def find(self, class_name: str) -> Optional["Element"]:
        """Return the first element in this subtree carrying a hook class."""
        for element in self.iter():
            if element.has_class(class_name):
                return element
        return None

    def to_html(self) -> str:
        """Serialize this subtree to HTML markup."""
        attrs = ""
        if self.class_name:
            attrs += f' class="{escape(self.class_name)}"'
        if self.style:
            style = "; ".join(f"{k}: {v}" for k, v in self.style.items())
            attrs += f' style="{escape(style)}"'

        if self.tag in VOID_TAGS:
            return f"<{self.tag}{attrs}>"

        inner = "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"


class TreeHost:
    """Render host that builds in-memory trees."""

    def create_element(
        self,
        tag: str,
        style: Optional[Mapping[str, str]] = None,
    ) -> Element:
        return Element(tag, style)

    def create_root(self) -> Element:
        """Create a detached container to mount widgets into."""
        return Element("div")
