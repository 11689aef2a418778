"""Element tree -> indented HTML."""
from __future__ import annotations

from .elements import Element


VOID_TAGS = ("input", "img")
INDENT = "  "


def generate_html(element: Element, indent: str = "") -> str:
    tag = element.tag
    class_str = f' class="{" ".join(element.classes)}"' if element.classes else ""
    attr_str = ""
    if element.attributes:
        attr_str = " " + " ".join(f'{key}="{value}"' for key, value in element.attributes.items())
    open_tag = f"<{tag}{class_str}{attr_str}>"

    if tag in VOID_TAGS:
        return f"{indent}{open_tag}"

    if element.text:
        return f"{indent}{open_tag}{element.text}</{tag}>"

    if not element.children:
        return f"{indent}{open_tag}</{tag}>"

    children_html = "\n".join(generate_html(child, indent + INDENT) for child in element.children)
    return f"{indent}{open_tag}\n{children_html}\n{indent}</{tag}>"
