"""Orchestrates one bootstrap run over a buffer snapshot.

A run moves through four stages and never goes back:

1. scan the selections for declarations lacking a section, creating the
   generated region if the buffer has none yet;
2. drop a placeholder line at the end of each lifecycle stub;
3. for each declaration, in scan order, register it in the three stubs and
   append its section before the region's end marker;
4. remove the placeholders that were placed.

Any anchor that cannot be found skips the step depending on it.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from view_bootstrap.buffer import LineBuffer, SelectionRange, last_selection
from view_bootstrap.config import DEFAULT_CONFIG, Lifecycle, ScaffoldConfig
from view_bootstrap.runtime import telemetry

from .locator import SectionLocator
from .naming import proper_name, section_label
from .scanner import scan_declarations


@dataclass(slots=True)
class ScaffoldResult:
    buffer: LineBuffer
    registered: Tuple[str, ...] = ()
    skipped: Tuple[str, ...] = ()
    region_created: bool = False
    placeholders: Tuple[Lifecycle, ...] = ()
    changed: bool = False


@dataclass(slots=True)
class _RunState:
    buffer: LineBuffer
    anchor: SelectionRange
    placed: List[Lifecycle] = field(default_factory=list)


class ScaffoldEditor:
    def __init__(
        self,
        config: ScaffoldConfig = DEFAULT_CONFIG,
        *,
        locator: Optional[SectionLocator] = None,
    ) -> None:
        self.config = config
        self.locator = locator or SectionLocator(config)

    def run(
        self, buffer: LineBuffer, selections: Sequence[SelectionRange]
    ) -> ScaffoldResult:
        selections = tuple(selections)
        anchor = last_selection(selections)
        if anchor is None:
            return ScaffoldResult(buffer=buffer)

        with telemetry.span(
            "scaffold::run",
            component=True,
            metadata={"selections": len(selections), "lines": buffer.line_count},
        ) as handle:
            targets, skipped = self._scan(buffer, selections, anchor)
            state = _RunState(buffer=buffer, anchor=anchor)

            region_created = False
            if not self.locator.has_region(state.buffer):
                region_created = self._create_region(state)

            self._add_placeholders(state)
            for name in targets:
                self._register(state, name)
            self._remove_placeholders(state)

            changed = state.buffer.lines != buffer.lines
            handle.add_metadata("registered", len(targets))
            handle.add_metadata("changed", changed)

        return ScaffoldResult(
            buffer=state.buffer,
            registered=tuple(targets),
            skipped=tuple(skipped),
            region_created=region_created,
            placeholders=tuple(state.placed),
            changed=changed,
        )

    # -- stage 1 --------------------------------------------------------

    def _scan(
        self,
        buffer: LineBuffer,
        selections: Sequence[SelectionRange],
        anchor: SelectionRange,
    ) -> Tuple[List[str], List[str]]:
        targets: List[str] = []
        skipped: List[str] = []
        for name in scan_declarations(buffer, selections):
            if self.locator.section_exists(buffer, anchor, name):
                skipped.append(name)
                telemetry.record_event(
                    "scaffold.skip_existing", level="debug", data={"name": name}
                )
            else:
                targets.append(name)
        return targets, skipped

    def _create_region(self, state: _RunState) -> bool:
        block_end = self.locator.enclosing_block_end(state.buffer, state.anchor)
        if block_end is None:
            telemetry.record_event(
                "scaffold.missing_block_end",
                level="warning",
                data={"after_line": state.anchor.end_line},
            )
            return False
        state.buffer = state.buffer.insert_block(block_end, self.config.region_block())
        telemetry.record_event("scaffold.region_created", data={"line": block_end})
        return True

    # -- stage 2 --------------------------------------------------------

    def _add_placeholders(self, state: _RunState) -> None:
        for stage in Lifecycle:
            closing = self.locator.lifecycle_body_end(state.buffer, state.anchor, stage)
            if closing is None:
                telemetry.record_event(
                    "scaffold.missing_stub",
                    level="warning",
                    data={"stage": stage.value},
                )
                continue
            state.buffer = state.buffer.prepend_line(
                closing, self.config.placeholder_line(stage)
            )
            state.placed.append(stage)

    # -- stage 3 --------------------------------------------------------

    def _register(self, state: _RunState, name: str) -> None:
        proper = proper_name(name)
        for stage in Lifecycle:
            line = self.locator.placeholder(state.buffer, stage)
            if line is None:
                continue
            state.buffer = state.buffer.prepend_line(
                line, self.config.registration_line(stage, name, proper)
            )

        region_end = self.locator.region_end(state.buffer)
        if region_end is not None:
            block = self.config.section_block(section_label(name), proper)
            state.buffer = state.buffer.insert_block(region_end, block)
        telemetry.record_event(
            "scaffold.registered",
            data={"name": name, "section": region_end is not None},
        )

    # -- stage 4 --------------------------------------------------------

    def _remove_placeholders(self, state: _RunState) -> None:
        for stage in state.placed:
            line = self.locator.placeholder(state.buffer, stage)
            if line is not None:
                state.buffer = state.buffer.replace_line(line, "")
                telemetry.record_event(
                    "scaffold.placeholder_removed",
                    level="debug",
                    data={"stage": stage.value, "line": line},
                )


def bootstrap_text(
    text: str,
    selections: Sequence[SelectionRange],
    *,
    config: ScaffoldConfig = DEFAULT_CONFIG,
) -> str:
    """Convenience wrapper returning the rewritten text only."""

    return ScaffoldEditor(config).run(LineBuffer.from_text(text), selections).buffer.text


__all__ = ["ScaffoldEditor", "ScaffoldResult", "bootstrap_text"]
