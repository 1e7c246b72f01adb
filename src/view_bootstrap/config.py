"""Literal templates and markers shared by every bootstrap run.

The markers and lifecycle signatures are persisted in the edited files and
searched for on later runs, so changing them orphans existing regions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping


class Lifecycle(str, Enum):
    """Lifecycle stubs living inside the generated region."""

    INITIALIZE = "initialize"
    ASSEMBLE = "assemble"
    CONSTRAIN = "constrain"


@dataclass(frozen=True, slots=True)
class LifecycleConfig:
    """How one lifecycle stub is declared, anchored and populated."""

    method: str
    placeholder: str
    registration: str

    @property
    def signature(self) -> str:
        return f"override func {self.method}() {{"

    @property
    def super_call(self) -> str:
        return f"super.{self.method}()"

    def render_registration(self, name: str, proper: str) -> str:
        return self.registration.format(name=name, proper=proper)


LIFECYCLE_CONFIGS: Mapping[Lifecycle, LifecycleConfig] = MappingProxyType(
    {
        Lifecycle.INITIALIZE: LifecycleConfig(
            "initializeViews", "%INITIALIZE%", "initialize{proper}()"
        ),
        Lifecycle.ASSEMBLE: LifecycleConfig(
            "assembleViews", "%ASSEMBLE%", "addSubview({name})"
        ),
        Lifecycle.CONSTRAIN: LifecycleConfig(
            "constrainViews", "%CONSTRAIN%", "constrain{proper}()"
        ),
    }
)


@dataclass(frozen=True, slots=True)
class ScaffoldConfig:
    member_indent: str = "    "
    body_indent: str = "        "
    start_title: str = "Begin View Hierarchy Construction"
    end_title: str = "End View Hierarchy Construction"
    lifecycles: Mapping[Lifecycle, LifecycleConfig] = field(
        default_factory=lambda: LIFECYCLE_CONFIGS
    )

    @property
    def start_mark(self) -> str:
        return self.mark(self.start_title)

    @property
    def end_mark(self) -> str:
        return self.mark(self.end_title)

    def mark(self, title: str) -> str:
        return f"{self.member_indent}// MARK: {title}"

    def lifecycle(self, stage: Lifecycle) -> LifecycleConfig:
        return self.lifecycles[stage]

    def placeholder_line(self, stage: Lifecycle) -> str:
        return f"{self.body_indent}{self.lifecycle(stage).placeholder}\n"

    def registration_line(self, stage: Lifecycle, name: str, proper: str) -> str:
        rendered = self.lifecycle(stage).render_registration(name, proper)
        return f"{self.body_indent}{rendered}\n"

    def region_block(self) -> str:
        """Start marker, the three lifecycle stubs and the end marker."""

        stubs = []
        for stage in Lifecycle:
            lifecycle = self.lifecycle(stage)
            stubs.append(
                f"{self.member_indent}{lifecycle.signature}\n"
                f"{self.body_indent}{lifecycle.super_call}\n"
                f"{self.member_indent}}}\n"
            )
        return f"{self.start_mark}\n\n" + "\n".join(stubs) + f"\n{self.end_mark}\n"

    def section_block(self, label: str, proper: str) -> str:
        """Labelled section holding the initializer and constraint stubs."""

        indent = self.member_indent
        initialize = f"{indent}private func initialize{proper}() {{\n\n{indent}}}"
        constrain = f"{indent}private func constrain{proper}() {{\n\n{indent}}}"
        return f"{self.mark(label)}\n\n{initialize}\n\n{constrain}\n\n"


DEFAULT_CONFIG = ScaffoldConfig()

ENV_PREFIX = "VIEW_BOOTSTRAP_"

__all__ = [
    "DEFAULT_CONFIG",
    "ENV_PREFIX",
    "LIFECYCLE_CONFIGS",
    "Lifecycle",
    "LifecycleConfig",
    "ScaffoldConfig",
]
