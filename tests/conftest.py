import pytest


@pytest.fixture
def page_document():
    """Minimal REST-shaped file JSON with one page and one frame."""
    return {
        "name": "Demo",
        "document": {
            "id": "0:0",
            "type": "DOCUMENT",
            "children": [{
                "id": "0:1",
                "type": "CANVAS",
                "name": "Page 1",
                "children": [{
                    "id": "1:2",
                    "type": "FRAME",
                    "name": "Top",
                    "absoluteBoundingBox": {"x": 0, "y": 0, "width": 1440, "height": 900},
                    "children": [{
                        "id": "1:3",
                        "type": "FRAME",
                        "name": "section.hero",
                        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 1440, "height": 400},
                        "layoutMode": "VERTICAL",
                        "primaryAxisSizingMode": "AUTO",
                        "counterAxisSizingMode": "FIXED",
                        "primaryAxisAlignItems": "CENTER",
                        "counterAxisAlignItems": "CENTER",
                        "itemSpacing": 24,
                        "paddingTop": 40, "paddingRight": 0, "paddingBottom": 40, "paddingLeft": 0,
                        "fills": [{"type": "SOLID", "color": {"r": 1, "g": 1, "b": 1, "a": 1}}],
                        "children": [
                            {
                                "id": "1:4",
                                "type": "TEXT",
                                "name": "h1.hero__title",
                                "characters": "Welcome",
                                "absoluteBoundingBox": {"x": 600, "y": 40, "width": 240, "height": 48},
                                "style": {
                                    "fontFamily": "Inter",
                                    "fontWeight": 700,
                                    "fontSize": 40,
                                    "letterSpacing": 0,
                                    "lineHeightPx": 48.4,
                                    "lineHeightUnit": "PIXELS",
                                    "textAlignHorizontal": "CENTER",
                                },
                                "fills": [{"type": "SOLID", "color": {"r": 0, "g": 0, "b": 0, "a": 1}}],
                            },
                            {
                                "id": "1:5",
                                "type": "RECTANGLE",
                                "name": 'img.hero__image[alt="Hero"]',
                                "absoluteBoundingBox": {"x": 520, "y": 112, "width": 400.4, "height": 248.6},
                                "fills": [{"type": "IMAGE", "imageRef": "abc"}],
                            },
                        ],
                    }],
                }],
            }],
        },
    }
