"""Element tree -> SCSS text.

One block per selector in first-seen order. Declarations are merged per
selector, and the closest FRAME parent of an absolutely positioned element
gets ``position: relative`` so ``left``/``top`` resolve against it.
"""
from __future__ import annotations

from typing import Optional

from .elements import Element
from .styles import node_styles


POSITION_ABSOLUTE = "position: absolute"
POSITION_RELATIVE = "position: relative"


class StyleCollector:
    """Selector -> ordered declaration set, filled by one pre-order walk."""

    def __init__(self):
        self.selectors: list[str] = []
        self.styles: dict[str, dict[str, None]] = {}
        self.absolute: dict[str, None] = {}
        # selector -> (parent, element) pairs in pre-order
        self.occurrences: dict[str, list[tuple[Optional[Element], Element]]] = {}

    def collect(self, element: Element, parent: Optional[Element] = None) -> None:
        selector = element.selector
        if selector:
            self.selectors.append(selector)
            declarations = self.styles.setdefault(selector, {})
            if element.source is not None:
                node_decls = node_styles(element.source)
                declarations.update(dict.fromkeys(node_decls))
                if POSITION_ABSOLUTE in node_decls:
                    self.absolute[selector] = None
            if parent is not None:
                self.occurrences.setdefault(selector, []).append((parent, element))

        for child in element.children:
            self.collect(child, element)

    def add_relative_parents(self) -> None:
        for selector in self.absolute:
            for parent, _ in self.occurrences.get(selector, []):
                parent_selector = parent.selector
                if parent_selector and parent.source is not None and parent.source.is_frame:
                    self.styles[parent_selector][POSITION_RELATIVE] = None
                    break

    def render(self) -> str:
        blocks = []
        for selector in dict.fromkeys(self.selectors):
            declarations = list(self.styles[selector])
            if declarations:
                blocks.append(f"{selector} {{\n  " + ";\n  ".join(declarations) + ";\n}\n")
        return "\n".join(blocks)


def generate_scss(element: Element) -> str:
    collector = StyleCollector()
    collector.collect(element)
    collector.add_relative_parents()
    return collector.render()
