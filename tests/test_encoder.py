"""Tests for the chat component encoder."""

from __future__ import annotations

import json
import uuid

import pytest

from jsoncrafter.encoder import Encoder, encode, encode_string, get_contents, to_json, to_string
from jsoncrafter.errors import CyclicStructureError, UnsupportedContentTypeError
from jsoncrafter.events import ClickAction, ClickEvent, HoverEvent, TooltipEntity, TooltipItem
from jsoncrafter.text import KeybindText, PlainText, TranslatedText


class TestContentEncoding:

    def test_plain(self):
        assert encode(PlainText("hello")) == {"text": "hello"}

    def test_plain_string_form(self):
        assert encode_string(PlainText("hello")) == '{"text":"hello"}'

    def test_translate_with_args(self):
        node = TranslatedText("%s joined the game", "Whirvis")
        assert encode_string(node) == '{"translate":"%s joined the game","with":["Whirvis"]}'

    def test_translate_without_args_omits_with(self):
        assert encode(TranslatedText("menu.quit")) == {"translate": "menu.quit"}

    def test_translate_node_argument(self):
        node = TranslatedText("chat.type.text", PlainText("Steve").set_color("red"), "hi")
        assert encode(node)["with"] == [{"text": "Steve", "color": "red"}, "hi"]

    def test_keybind(self):
        assert encode(KeybindText("key.inventory")) == {"keybind": "key.inventory"}

    def test_scalar_plain_values_kept(self):
        assert encode(PlainText(5)) == {"text": 5}
        assert encode(PlainText(True)) == {"text": True}

    def test_unsupported_plain_value_fails_at_encode(self):
        node = PlainText(object())
        with pytest.raises(UnsupportedContentTypeError):
            encode(node)

    def test_non_finite_float_rejected(self):
        with pytest.raises(UnsupportedContentTypeError):
            encode(PlainText(float("nan")))

    def test_non_ascii_kept(self):
        assert encode_string(PlainText("café")) == '{"text":"café"}'


class TestStyleEncoding:

    def test_unset_keys_omitted(self):
        node = PlainText("x").set_bold(True)
        assert encode(node) == {"text": "x", "bold": True}

    def test_false_is_written(self):
        assert encode(PlainText("x").set_italic(False)) == {"text": "x", "italic": False}

    def test_hex_color(self):
        assert encode(PlainText("x").set_color(0x00FF00))["color"] == "#00ff00"

    def test_display_defaults_never_written(self):
        node = PlainText("x")
        assert node.color == "white"
        assert "color" not in encode(node)

    def test_all_style_keys(self):
        node = PlainText("x").set_style(
            color="red",
            font="minecraft:alt",
            bold=True,
            italic=True,
            underlined=False,
            strikethrough=True,
            obfuscated=False,
            insertion="hi",
        )
        assert list(encode(node)) == [
            "text", "color", "font", "bold", "italic",
            "underlined", "strikethrough", "obfuscated", "insertion",
        ]


class TestStructure:

    def test_extra_preserves_order(self):
        node = PlainText("a").add_children(PlainText("b"), PlainText("c").set_bold(True))
        assert encode(node) == {
            "text": "a",
            "extra": [{"text": "b"}, {"text": "c", "bold": True}],
        }

    def test_no_children_omits_extra(self):
        assert "extra" not in encode(PlainText("a"))

    def test_key_order(self):
        node = (
            PlainText("a")
            .set_event(HoverEvent().show("tip"))
            .set_event(ClickEvent.run_command("/go"))
            .set_bold(True)
            .set_color("gold")
            .add_children(PlainText("b"))
        )
        assert list(encode(node)) == ["text", "extra", "color", "bold", "clickEvent", "hoverEvent"]

    def test_nested_tree(self):
        leaf = PlainText("leaf")
        node = PlainText("root").add_children(PlainText("mid").add_children(leaf))
        assert encode(node)["extra"][0]["extra"] == [{"text": "leaf"}]

    def test_indent(self):
        text = Encoder(indent=2).encode_string(PlainText("a").set_bold(True))
        assert text == '{\n  "text": "a",\n  "bold": true\n}'

    def test_string_form_parses_back(self):
        node = PlainText("a").add_children(TranslatedText("k", 1)).set_event(ClickEvent.change_page(2))
        assert json.loads(str(node)) == encode(node)


class TestEventEncoding:

    def test_click(self):
        node = PlainText("x").set_event(ClickEvent.open_url("https://example.com"))
        assert encode(node)["clickEvent"] == {"action": "open_url", "value": "https://example.com"}

    def test_action_without_value(self):
        node = PlainText("x").set_event(ClickEvent("open_url"))
        assert encode(node)["clickEvent"] == {"action": "open_url"}

    def test_empty_click(self):
        assert encode(PlainText("x").set_event(ClickEvent()))["clickEvent"] == {}

    def test_change_page_is_int(self):
        node = PlainText("x").set_event(ClickEvent.change_page(3))
        assert encode(node)["clickEvent"] == {"action": "change_page", "value": 3}

    def test_value_without_action(self):
        event = ClickEvent().set_text("/spawn")
        assert Encoder().encode_event(event) == {"value": "/spawn"}
        assert event.action is None

    def test_single_hover_text_inlined(self):
        node = PlainText("x").set_event(HoverEvent().show("a"))
        assert encode(node)["hoverEvent"] == {"action": "show_text", "contents": {"text": "a"}}

    def test_multiple_hover_texts_array(self):
        node = PlainText("x").set_event(HoverEvent().show("a", "b"))
        assert encode(node)["hoverEvent"] == {
            "action": "show_text",
            "contents": [{"text": "a"}, {"text": "b"}],
        }

    def test_empty_hover_omits_contents(self):
        node = PlainText("x").set_event(HoverEvent().show())
        assert encode(node)["hoverEvent"] == {"action": "show_text"}

    def test_styled_hover_text(self):
        node = PlainText("x").set_event(HoverEvent().show(PlainText("warn").set_color("red")))
        assert encode(node)["hoverEvent"]["contents"] == {"text": "warn", "color": "red"}

    def test_show_item(self):
        item = TooltipItem("minecraft:diamond_sword", 1, "{Damage:10}")
        node = PlainText("x").set_event(HoverEvent().show(item))
        assert encode(node)["hoverEvent"] == {
            "action": "show_item",
            "contents": {"id": "minecraft:diamond_sword", "count": 1, "tag": "{Damage:10}"},
        }

    def test_show_item_unset_fields_omitted(self):
        node = PlainText("x").set_event(HoverEvent().show(TooltipItem("minecraft:stone")))
        assert encode(node)["hoverEvent"]["contents"] == {"id": "minecraft:stone"}

    def test_show_entity(self):
        entity_id = uuid.uuid4()
        entity = TooltipEntity(entity_id, "minecraft:creeper", PlainText("Boom").set_color("green"))
        node = PlainText("x").set_event(HoverEvent().show(entity))
        assert encode(node)["hoverEvent"] == {
            "action": "show_entity",
            "contents": {
                "name": {"text": "Boom", "color": "green"},
                "type": "minecraft:creeper",
                "id": str(entity_id),
            },
        }

    def test_show_entity_plain_name(self):
        entity = TooltipEntity(uuid.uuid4(), name="Bob")
        contents = Encoder().encode_event(HoverEvent().show(entity))["contents"]
        assert contents["name"] == "Bob"
        assert "type" not in contents

    def test_action_enum_value_written(self):
        event = ClickEvent(ClickAction.SUGGEST_COMMAND).set_text("/msg ")
        assert Encoder().encode_event(event) == {"action": "suggest_command", "value": "/msg "}


class TestCycleGuard:

    def test_hover_edited_after_attach(self):
        node = PlainText("x")
        hover = HoverEvent().show("tip")
        node.set_event(hover)
        hover.show(node)
        with pytest.raises(CyclicStructureError):
            encode(node)
        with pytest.raises(CyclicStructureError):
            list(node.walk())

    def test_entity_name_edited_after_attach(self):
        node = PlainText("x")
        entity = TooltipEntity(uuid.uuid4())
        node.set_event(HoverEvent().show(entity))
        entity.set_name(node)
        with pytest.raises(CyclicStructureError):
            str(node)

    def test_indirect_hover_cycle(self):
        root = PlainText("root")
        hover = HoverEvent()
        child = PlainText("child").set_event(hover)
        root.add_children(child)
        hover.show(root)
        with pytest.raises(CyclicStructureError):
            encode_string(root)

    def test_shared_subtree_is_not_a_cycle(self):
        shared = PlainText("s").set_bold(True)
        root = PlainText("").add_children(shared, PlainText("-"), shared)
        assert encode(root)["extra"] == [
            {"text": "s", "bold": True},
            {"text": "-"},
            {"text": "s", "bold": True},
        ]


class TestModuleHelpers:

    def test_to_json(self):
        assert to_json(["a", PlainText("b").set_bold(True), 3]) == [
            {"text": "a"},
            {"text": "b", "bold": True},
            {"text": "3"},
        ]

    def test_to_json_skips_none(self):
        assert to_json(["a", None]) == [{"text": "a"}]

    def test_to_json_empty(self):
        assert to_json([]) == []

    def test_to_string(self):
        assert to_string(["a", "b"]) == '[{"text":"a"},{"text":"b"}]'

    def test_get_contents(self):
        assert get_contents(["a", PlainText("b"), 1]) == "ab1"

    def test_get_contents_delimiter(self):
        assert get_contents(["a", None, "b"], ", ") == "a, b"

    def test_get_contents_ignores_children(self):
        node = PlainText("a").add_children(PlainText("b"))
        assert get_contents([node]) == "a"

    def test_get_contents_translation_key(self):
        assert get_contents([TranslatedText("menu.quit"), KeybindText("key.jump")], " ") == "menu.quit key.jump"

    def test_node_to_json(self):
        node = PlainText("a")
        assert node.to_json() == {"text": "a"}
