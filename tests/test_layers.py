"""Tests for layer renaming and PC/SP layouts on JSON documents."""

import pytest

from figma_markup.layers import apply_device_layout, default_layer_name, rename_layers
from figma_markup.scene import SceneError


@pytest.fixture
def frame_dict():
    return {
        "type": "FRAME",
        "name": "Top",
        "absoluteBoundingBox": {"x": 0, "y": 0, "width": 1440, "height": 900},
        "children": [
            {"type": "TEXT", "name": "Heading"},
            {"type": "FRAME", "name": "Frame 3", "children": [
                {"type": "RECTANGLE", "name": "Rectangle 1",
                 "absoluteBoundingBox": {"width": 320.4, "height": 199.6},
                 "fills": [{"type": "IMAGE"}]},
                {"type": "RECTANGLE", "name": "Rectangle 2", "fills": [{"type": "SOLID"}]},
                {"type": "VECTOR", "name": "Vector"},
            ]},
            {"type": "FRAME", "name": "div.keep", "children": [
                {"type": "TEXT", "name": "p.lead"},
                {"type": "RECTANGLE", "name": 'img[src="a.png"]'},
            ]},
        ],
    }


class TestRename:
    def test_renames_descendants(self, frame_dict):
        count = rename_layers(frame_dict)
        children = frame_dict["children"]
        assert frame_dict["name"] == "Top"
        assert children[0]["name"] == "p"
        assert children[1]["name"] == "div"
        assert [c["name"] for c in children[1]["children"]] == [
            'img[src="https://placehold.jp/320x200.png"]',
            "div",
            "div",
        ]
        assert count == 5

    def test_named_layers_kept(self, frame_dict):
        rename_layers(frame_dict)
        keep = frame_dict["children"][2]
        assert keep["name"] == "div.keep"
        assert [c["name"] for c in keep["children"]] == ["p.lead", 'img[src="a.png"]']

    def test_idempotent(self, frame_dict):
        rename_layers(frame_dict)
        # bare "p" / "div" do not match the named pattern, so they are rewritten to themselves
        names = [c["name"] for c in frame_dict["children"]]
        rename_layers(frame_dict)
        assert [c["name"] for c in frame_dict["children"]] == names

    def test_requires_frame(self):
        with pytest.raises(SceneError):
            rename_layers({"type": "GROUP", "children": []})

    def test_default_name_for_image_without_size(self):
        assert default_layer_name({"type": "RECTANGLE", "fills": [{"type": "IMAGE"}]}) == \
            'img[src="https://placehold.jp/0x0.png"]'


class TestDeviceLayout:
    @pytest.fixture
    def responsive(self):
        return {
            "type": "FRAME", "name": "Top", "width": 1000, "height": 900,
            "absoluteBoundingBox": {"x": 0, "y": 0, "width": 1000, "height": 900},
            "children": [
                {"type": "FRAME", "name": "div.nav.is_pc", "children": [
                    {"type": "TEXT", "name": "p.is_sp"},
                ]},
                {"type": "FRAME", "name": "div.menu.is_sp", "visible": False},
                {"type": "TEXT", "name": "p.both.is_pc.is_sp"},
                {"type": "TEXT", "name": "p.plain"},
            ],
        }

    def test_sp_layout(self, responsive):
        counts = apply_device_layout(responsive, "sp")
        nav, menu, both, plain = responsive["children"]
        assert responsive["width"] == 425
        assert responsive["absoluteBoundingBox"]["width"] == 425
        assert responsive["height"] == 900
        assert nav["visible"] is False
        assert nav["children"][0]["visible"] is True
        assert menu["visible"] is True
        assert both["visible"] is False
        assert "visible" not in plain
        assert counts == {"shown": 2, "hidden": 2}

    def test_pc_layout(self, responsive):
        apply_device_layout(responsive, "pc")
        nav, menu, both, _ = responsive["children"]
        assert responsive["width"] == 1440
        assert nav["visible"] is True
        assert nav["children"][0]["visible"] is False
        assert menu["visible"] is False
        assert both["visible"] is True

    def test_unknown_device(self, responsive):
        with pytest.raises(ValueError):
            apply_device_layout(responsive, "tablet")
