"""Document element representation.

Element is a namespace-free view of one markup element, independent of
the XML library used to read the file.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field


@dataclass
class Element:
    """A document element with string attributes and child elements.

    Attributes:
        name: Local tag name (e.g. "rect", "path")
        attributes: Attribute values keyed by local attribute name
        children: Child elements in document order
    """

    name: str
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Element"] = field(default_factory=list)

    def get(self, attribute: str, default: str | None = None) -> str | None:
        return self.attributes.get(attribute, default)

    def iter_preorder(self) -> Iterator["Element"]:
        """Yield this element and its descendants in document pre-order.

        Uses an explicit stack so deeply nested documents do not hit the
        recursion limit.
        """
        stack = [self]
        while stack:
            element = stack.pop()
            yield element
            stack.extend(reversed(element.children))
