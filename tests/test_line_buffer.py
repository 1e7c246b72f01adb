from __future__ import annotations

import re

from view_bootstrap.buffer import LineBuffer, is_blank


def make_buffer() -> LineBuffer:
    return LineBuffer.from_text("alpha\n    beta\n}\ngamma beta\n")


def test_find_string_respects_bounds() -> None:
    buffer = make_buffer()

    assert buffer.find_string("beta", 0, buffer.line_count) == 1
    assert buffer.find_string("beta", 2, 2) == 3
    assert buffer.find_string("beta", 2, 1) is None


def test_empty_or_inverted_range_is_not_found() -> None:
    buffer = make_buffer()

    assert buffer.find_string("alpha", 0, 0) is None
    assert buffer.find_string("alpha", 0, -3) is None
    assert buffer.find_pattern(r"^\}", 3, 2 - 3) is None


def test_find_pattern_accepts_compiled_and_raw() -> None:
    buffer = make_buffer()

    assert buffer.find_pattern(r"^\}", 0, buffer.line_count) == 2
    assert buffer.find_pattern(re.compile(r"^    \w"), 0, buffer.line_count) == 1


def test_find_pattern_span_reports_absolute_offsets() -> None:
    buffer = make_buffer()

    span = buffer.find_pattern_span(r"beta", 2, 2)

    assert span == (len("alpha\n    beta\n}\ngamma "), 4)
    assert buffer.text[span[0] : span[0] + span[1]] == "beta"


def test_prepend_line_returns_new_snapshot() -> None:
    buffer = make_buffer()

    updated = buffer.prepend_line(2, "    inserted\n")

    assert updated.lines[2] == "    inserted\n"
    assert updated.lines[3] == "}\n"
    assert updated.version == buffer.version + 1
    assert buffer.lines[2] == "}\n"


def test_replace_with_empty_string_deletes_line() -> None:
    buffer = make_buffer()

    updated = buffer.replace_line(1, "")

    assert updated.lines == ("alpha\n", "}\n", "gamma beta\n")


def test_out_of_range_target_is_noop() -> None:
    buffer = make_buffer()

    assert buffer.prepend_line(buffer.line_count, "x\n") is buffer
    assert buffer.replace_line(-1, "") is buffer
    assert buffer.insert_block(99, "x\n") is buffer


def test_insert_block_separates_from_code_above() -> None:
    buffer = LineBuffer.from_text("a\n}\n")

    updated = buffer.insert_block(1, "block\n")

    assert updated.text == "a\n\nblock\n}\n"


def test_insert_block_after_blank_line_adds_no_separator() -> None:
    buffer = LineBuffer.from_text("a\n  \n}\n")

    updated = buffer.insert_block(2, "block\n")

    assert updated.text == "a\n  \nblock\n}\n"


def test_is_blank_requires_line_terminator() -> None:
    assert is_blank("\n")
    assert is_blank(" \t\n")
    assert not is_blank("   ")
    assert not is_blank("  x\n")


def test_only_newline_ends_a_line() -> None:
    buffer = LineBuffer.from_text(
        "class A {\n    // page \x0c break \x85   here\n    let fooView = UIView()\n}"
    )

    assert buffer.line_count == 4
    assert "let fooView" in buffer.lines[2]
    assert buffer.lines[-1] == "}"
    assert buffer.prepend_line(3, "x\n").lines[3:] == ("x\n", "}")


def test_crlf_blank_line_counts_as_separator() -> None:
    buffer = LineBuffer.from_text("a\r\n\r\n}\r\n")

    assert is_blank("\r\n")
    assert buffer.insert_block(2, "block\n").text == "a\r\n\r\nblock\n}\r\n"
