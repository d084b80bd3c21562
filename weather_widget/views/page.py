"""
This module provides the render surface the widget draws into.

The page content area is an owned tree of elements rather than ambient
global state, so the render pipeline can be pointed at any ``PageView``
and tests can inspect what was drawn. Markup is produced from the tree by
the templates in ``weather_widget/views/templates``.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass
class Element:
    tag: str
    text: str = ""
    classes: List[str] = field(default_factory=list)
    attrs: Dict[str, str] = field(default_factory=dict)
    children: List["Element"] = field(default_factory=list)
    element_id: Optional[str] = None

    def append(self, *children: "Element") -> "Element":
        self.children.extend(children)
        return self

    def iter(self) -> Iterator["Element"]:
        """Walk this element and its descendants depth-first."""
        yield self
        for child in self.children:
            yield from child.iter()


class PageView:
    """
    The page content area plus the city input it controls.
    """

    def __init__(self, city_input: str = ""):
        self.elements: List[Element] = []
        self.city_input = city_input

    def clear(self) -> None:
        self.elements = []

    def append(self, element: Element) -> None:
        self.elements.append(element)

    def remove(self, element_id: str) -> bool:
        """
        Remove a top-level element by id.

        Returns:
            True if an element was removed
        """
        for index, element in enumerate(self.elements):
            if element.element_id == element_id:
                del self.elements[index]
                return True
        return False

    def clear_city_input(self) -> None:
        self.city_input = ""

    def iter(self) -> Iterator[Element]:
        for element in self.elements:
            yield from element.iter()

    def find(self, element_id: str) -> Optional[Element]:
        return next((e for e in self.iter() if e.element_id == element_id), None)

    def find_all(self, class_name: str) -> List[Element]:
        return [e for e in self.iter() if class_name in e.classes]

    def texts(self) -> List[str]:
        return [e.text for e in self.iter() if e.text]
