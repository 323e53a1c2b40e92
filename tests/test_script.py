import codecs

import pytest

from ahkmap.core.models import Binding, Modifier
from ahkmap.core.script import detect_encoding, parse_script, read_script

SAMPLE = """
#NoEnv
SendMode Input

; Jump to menu
^!F1::DoSomething

; --> Open inventory <--
i::Send, i
+i::Send, I

/*
a::ShouldNotBind
; not a description
*/ b::AlsoIgnored

$a::Foo
F2::
    MsgBox, hi
return
"""


def test_comment_becomes_description_with_modifiers():
    hotkeys = parse_script(["; Jump to menu", "^!F1::DoSomething"])
    assert list(hotkeys) == ["f1"]
    assert hotkeys["f1"] == [Binding("f1", Modifier(alt=True, shift=False, ctrl=True), "Jump to menu")]


def test_dollar_prefix_is_ignored():
    hotkeys = parse_script(["$a::Foo"])
    assert hotkeys == {"a": [Binding("a", Modifier(), "")]}


def test_comment_trim_characters():
    hotkeys = parse_script(["  ;-->  Open inventory\t<--  ", "i::x"])
    assert hotkeys["i"][0].description == "Open inventory"


def test_comment_persists_until_replaced():
    hotkeys = parse_script(["; first", "a::x", "b::y", "; second", "c::z"])
    assert [hotkeys[k][0].description for k in "abc"] == ["first", "first", "second"]


def test_block_comment_never_binds():
    hotkeys = parse_script(SAMPLE.splitlines())
    assert "b" not in hotkeys
    assert [b.description for b in hotkeys["a"]] == ["Open inventory"]


def test_block_comment_content_does_not_set_description():
    hotkeys = parse_script(["; kept", "/*", "; dropped", "*/", "x::y"])
    assert hotkeys["x"][0].description == "kept"


def test_same_key_accumulates_in_file_order():
    hotkeys = parse_script(SAMPLE.splitlines())
    assert [b.mod for b in hotkeys["i"]] == [Modifier(), Modifier(shift=True)]


def test_insertion_order_is_first_appearance():
    hotkeys = parse_script(SAMPLE.splitlines())
    assert list(hotkeys) == ["f1", "i", "a", "f2"]


def test_key_names_are_lowercased():
    hotkeys = parse_script(["^Space::x", "SPACE::y"])
    assert list(hotkeys) == ["space"]
    assert len(hotkeys["space"]) == 2


def test_modifier_only_line_gives_empty_key():
    hotkeys = parse_script(["^!::x"])
    assert hotkeys == {"": [Binding("", Modifier(alt=True, ctrl=True), "")]}


def test_non_binding_lines_are_ignored():
    assert parse_script(["", "   ", "#SingleInstance force", "Send, x", "return"]) == {}


def test_parsing_is_idempotent():
    lines = SAMPLE.splitlines()
    assert parse_script(lines) == parse_script(lines)


def test_read_script_from_file(tmp_path):
    path = tmp_path / "macros.ahk"
    path.write_text("\ufeff; Jump to menu\n^!F1::DoSomething\n", encoding="utf-8")
    hotkeys = read_script(path)
    assert hotkeys["f1"][0].description == "Jump to menu"


def test_read_script_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        read_script(tmp_path / "nope.ahk")


def test_zero_bindings_file(tmp_path):
    path = tmp_path / "empty.ahk"
    path.write_text("; only a comment\nMsgBox, hi\n", encoding="utf-8")
    assert read_script(path) == {}


@pytest.mark.parametrize("encoding", ["utf-16", "utf-16-be", "utf-32"])
def test_read_script_follows_byte_order_mark(tmp_path, encoding):
    path = tmp_path / "unicode.ahk"
    text = "; Jump to menu\r\n^!F1::DoSomething\r\n"
    data = text.encode(encoding)
    if encoding == "utf-16-be":
        data = codecs.BOM_UTF16_BE + data
    path.write_bytes(data)

    hotkeys = read_script(path)

    assert hotkeys["f1"] == [Binding("f1", Modifier(alt=True, ctrl=True), "Jump to menu")]


def test_detect_encoding():
    assert detect_encoding(codecs.BOM_UTF32_LE) == "utf-32"
    assert detect_encoding(codecs.BOM_UTF16_LE + b"a\x00") == "utf-16"
    assert detect_encoding(codecs.BOM_UTF16_BE) == "utf-16"
    assert detect_encoding(b"a::b") == "utf-8-sig"
