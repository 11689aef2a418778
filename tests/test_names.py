"""Tests for the layer name parser."""

import pytest

from figma_markup.names import ParsedName, parse_node_name


class TestDefaults:
    def test_empty_name(self):
        assert parse_node_name("") == ParsedName(tag="div", classes=[], attributes={})

    def test_none_name(self):
        assert parse_node_name(None).tag == "div"

    def test_bare_tag(self):
        parsed = parse_node_name("section")
        assert parsed.tag == "section"
        assert parsed.classes == []
        assert parsed.attributes == {}

    def test_leading_class_defaults_to_div(self):
        parsed = parse_node_name(".card")
        assert parsed.tag == "div"
        assert parsed.classes == ["card"]

    @pytest.mark.parametrize("name", [
        "Frame 12", "..", "##", "[", ']["', '[a="', "div.[x]", "img[src=]", "a..b", "#",
    ])
    def test_garbled_input_never_raises(self, name):
        parsed = parse_node_name(name)
        assert isinstance(parsed.tag, str) and parsed.tag
        assert all(parsed.classes)


class TestClassesAndId:
    def test_class_id_and_attribute(self):
        parsed = parse_node_name('div.card#main[data-x="1"]')
        assert parsed.tag == "div"
        assert parsed.classes == ["card"]
        assert parsed.attributes == {"id": "main", "data-x": "1"}

    def test_id_between_classes(self):
        parsed = parse_node_name('div.class1#myId.class2[attr1="value1"]')
        assert parsed.classes == ["class1", "class2"]
        assert parsed.attributes == {"attr1": "value1", "id": "myId"}

    def test_id_right_after_tag(self):
        parsed = parse_node_name("section#top.hero")
        assert parsed.tag == "section"
        assert parsed.classes == ["hero"]
        assert parsed.attributes["id"] == "top"

    def test_last_id_wins(self):
        parsed = parse_node_name("div#a.x#b")
        assert parsed.attributes["id"] == "b"
        assert parsed.classes == ["x"]

    def test_class_order_kept(self):
        assert parse_node_name("ul.b.a.c").classes == ["b", "a", "c"]

    def test_bem_classes(self):
        parsed = parse_node_name("p.card__title.card__title--large")
        assert parsed.tag == "p"
        assert parsed.classes == ["card__title", "card__title--large"]


class TestAttributes:
    def test_multiple_groups(self):
        parsed = parse_node_name('a.link[href="/about"][target="_blank"]')
        assert parsed.tag == "a"
        assert parsed.classes == ["link"]
        assert parsed.attributes == {"href": "/about", "target": "_blank"}

    def test_several_pairs_in_one_group(self):
        parsed = parse_node_name('input[type="text" name="q"]')
        assert parsed.tag == "input"
        assert parsed.attributes == {"type": "text", " name": "q"}

    def test_keys_in_one_group_kept_verbatim(self):
        parsed = parse_node_name('a[href="/x" target="_blank"]')
        assert parsed.attributes == {"href": "/x", " target": "_blank"}
        assert "target" not in parsed.attributes

    def test_keys_not_normalized(self):
        parsed = parse_node_name('div[data-Value="X"]')
        assert parsed.attributes == {"data-Value": "X"}

    def test_attribute_values_keep_dots(self):
        parsed = parse_node_name('img.thumb[src="./images/a.png"]')
        assert parsed.tag == "img"
        assert parsed.classes == ["thumb"]
        assert parsed.attributes == {"src": "./images/a.png"}

    def test_attribute_before_classes(self):
        parsed = parse_node_name('button[type="submit"].btn')
        assert parsed.tag == "button"
        assert parsed.classes == ["btn"]
        assert parsed.attributes == {"type": "submit"}
