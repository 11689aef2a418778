"""Scene node builders shared by the tests."""

from figma_markup.scene import LayoutFacet, Paint, SceneNode, TextFacet


def solid(r=0.0, g=0.0, b=0.0, opacity=None, visible=True):
    return Paint(type="SOLID", visible=visible, opacity=opacity, color={"r": r, "g": g, "b": b})


def frame(name="div", children=(), **kw):
    return SceneNode(type="FRAME", name=name, children=list(children), **kw)


def auto_layout(mode="HORIZONTAL", **kw):
    defaults = dict(primary_sizing="FIXED", counter_sizing="FIXED")
    defaults.update(kw)
    return LayoutFacet(mode=mode, **defaults)


def text(characters="Hello", name="p", fills=(), **kw):
    return SceneNode(
        type="TEXT",
        name=name,
        text=TextFacet(characters=characters, **kw),
        fills=list(fills),
        width=100,
        height=20,
    )


