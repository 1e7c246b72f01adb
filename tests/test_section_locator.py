from __future__ import annotations

from view_bootstrap.buffer import LineBuffer, SelectionRange
from view_bootstrap.config import Lifecycle
from view_bootstrap.scaffold import SectionLocator

REGION_SOURCE = (
    "class Card: BaseView {\n"  # 0
    "    let fooView = UIView()\n"  # 1
    "\n"  # 2
    "    // MARK: Begin View Hierarchy Construction\n"  # 3
    "\n"  # 4
    "    override func initializeViews() {\n"  # 5
    "        super.initializeViews()\n"  # 6
    "    }\n"  # 7
    "\n"  # 8
    "    override func assembleViews() {\n"  # 9
    "        super.assembleViews()\n"  # 10
    "    }\n"  # 11
    "\n"  # 12
    "    // MARK: Foo View\n"  # 13
    "\n"  # 14
    "    // MARK: End View Hierarchy Construction\n"  # 15
    "}\n"  # 16
    "\n"  # 17
    "extension Card {\n"  # 18
    "}\n"  # 19
)


def make_locator() -> tuple[SectionLocator, LineBuffer]:
    return SectionLocator(), LineBuffer.from_text(REGION_SOURCE)


def test_enclosing_block_end_is_first_column_zero_brace_after_selection() -> None:
    locator, buffer = make_locator()

    assert locator.enclosing_block_end(buffer, SelectionRange.lines(1)) == 16
    assert locator.enclosing_block_end(buffer, SelectionRange.lines(17)) == 19


def test_lifecycle_body_end_finds_stub_closing_line() -> None:
    locator, buffer = make_locator()
    selection = SelectionRange.lines(1)

    assert locator.lifecycle_body_end(buffer, selection, Lifecycle.INITIALIZE) == 7
    assert locator.lifecycle_body_end(buffer, selection, Lifecycle.ASSEMBLE) == 11
    assert locator.lifecycle_body_end(buffer, selection, Lifecycle.CONSTRAIN) is None


def test_lifecycle_search_starts_at_selection_end() -> None:
    locator, buffer = make_locator()

    below = SelectionRange.lines(8)

    assert locator.lifecycle_body_end(buffer, below, Lifecycle.INITIALIZE) is None
    assert locator.lifecycle_body_end(buffer, below, Lifecycle.ASSEMBLE) == 11


def test_region_markers() -> None:
    locator, buffer = make_locator()

    assert locator.has_region(buffer)
    assert locator.region_end(buffer) == 15
    assert not locator.has_region(LineBuffer.from_text("class A {\n}\n"))
    assert locator.region_end(LineBuffer.from_text("class A {\n}\n")) is None


def test_section_exists_is_bounded_to_enclosing_block() -> None:
    locator, buffer = make_locator()

    assert locator.section_exists(buffer, SelectionRange.lines(1), "fooView")
    assert not locator.section_exists(buffer, SelectionRange.lines(1), "barView")
    assert not locator.section_exists(buffer, SelectionRange.lines(14), "fooView")


def test_function_body_end_stops_at_first_member_level_brace() -> None:
    # Indentation-only matching: a mis-indented inner brace ends the body early.
    locator = SectionLocator()
    buffer = LineBuffer.from_text(
        "class A {\n"
        "    func layout() {\n"
        "        if ready {\n"
        "    }\n"
        "        }\n"
        "    }\n"
        "}\n"
    )

    assert locator.function_body_end(buffer, 1, 6) == 3


def test_function_body_end_without_block_room_is_not_found() -> None:
    locator, buffer = make_locator()

    assert locator.function_body_end(buffer, 9, 9) is None
    assert locator.function_body_end(buffer, 9, 5) is None
