"""Layer name DSL: ``tag.class1.class2#id[attr="value"]``."""
from __future__ import annotations

import re
from dataclasses import dataclass, field


DEFAULT_TAG = "div"

ATTR_GROUP_RE = re.compile(r"\[(.*?)\]")
ATTR_PAIR_RE = re.compile(r'([^=]+)="([^"]+)"')


@dataclass
class ParsedName:
    tag: str = DEFAULT_TAG
    classes: list[str] = field(default_factory=list)
    attributes: dict[str, str] = field(default_factory=dict)


def parse_node_name(name: str) -> ParsedName:
    """Parse a layer name into tag, classes and attributes.

    Example: ``div.class1#myId.class2[attr1="value1"]`` gives tag ``div``,
    classes ``["class1", "class2"]`` and attributes
    ``{"attr1": "value1", "id": "myId"}``. Never raises; anything it cannot
    read falls back to a bare ``div``.
    """
    result = ParsedName()
    clean = name or ""

    # attributes (several [..] groups allowed), keys kept verbatim
    for group in ATTR_GROUP_RE.findall(clean):
        for key, value in ATTR_PAIR_RE.findall(group):
            result.attributes[key] = value
        clean = clean.replace(f"[{group}]", "", 1)

    parts = re.split(r"[.#]", clean)
    if parts[0]:
        result.tag = parts[0]

    if len(parts) > 1:
        for part in clean[len(parts[0]):].split("."):
            # "card#main" carries a class and an id in one token
            cls, *ids = part.split("#")
            if cls:
                result.classes.append(cls)
            for id_ in ids:
                if id_:
                    result.attributes["id"] = id_

    return result
