"""Scene tree -> element descriptor tree."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from .names import parse_node_name
from .scene import SceneNode


IMG_PLACEHOLDER_SRC = "./images/dummy.jpg"


@dataclass(eq=False)
class Element:
    tag: str
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)
    children: list["Element"] = field(default_factory=list)
    text: Optional[str] = None
    source: Optional[SceneNode] = field(default=None, repr=False)

    @property
    def selector(self) -> str:
        return derive_selector(self.tag, self.classes)


def derive_selector(tag: str, classes) -> str:
    """Stylesheet key for an element.

    ``.a.b`` from the classes (``js-`` hooks left out), else the bare tag.
    ``picture`` wrappers without classes get no rule. A class list made only
    of ``js-`` hooks still takes the class branch and yields ``"."``.
    """
    if classes:
        return "." + ".".join(c for c in classes if not c.startswith("js-"))
    return tag if tag != "picture" else ""


def build_element(node: SceneNode) -> Element:
    parsed = parse_node_name(node.name)

    if parsed.tag == "img":
        attributes = {
            "src": parsed.attributes.get("src") or IMG_PLACEHOLDER_SRC,
            "width": str(int(round(node.width))),
            "height": str(int(round(node.height))),
        }
        if parsed.attributes.get("alt"):
            attributes["alt"] = parsed.attributes["alt"]
        return Element(tag="img", classes=parsed.classes, attributes=attributes, source=node)

    return Element(
        tag=parsed.tag,
        classes=parsed.classes,
        attributes=parsed.attributes,
        children=[build_element(child) for child in node.children],
        text=node.characters if node.is_text else None,
        source=node,
    )
