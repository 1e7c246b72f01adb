"""Telemetry services built directly on telelog.

``configure`` picks the telelog config, ``record_event`` writes one structured
event and ``span`` profiles a bootstrap run as a tracked component.
"""

from __future__ import annotations

import os
from contextlib import ExitStack, contextmanager
from typing import Any, Dict, Iterator, MutableMapping, Optional, cast

import telelog  # type: ignore[import]

from view_bootstrap.config import ENV_PREFIX

tl = cast(Any, telelog)

DEFAULT_LOGGER_NAME = os.getenv(f"{ENV_PREFIX}LOGGER", "view_bootstrap")
PRESETS = ("development", "production")

_LOGGER_CACHE: MutableMapping[str, Any] = {}
_ACTIVE_CONFIG: Optional[Any] = None


def _env(name: str) -> Optional[str]:
    return os.getenv(f"{ENV_PREFIX}{name}")


def _env_flag(name: str, default: bool) -> bool:
    raw = _env(name)
    if raw is None:
        return default
    return raw.lower() in {"1", "true", "yes", "on"}


def _pairs(data: Dict[str, Any]) -> list[tuple[str, str]]:
    return [(str(key), str(value)) for key, value in data.items()]


def _build_config(preset: Optional[str]) -> Any:
    config = tl.Config()
    if preset == "development":
        config.with_min_level("DEBUG")
        config.with_console_output(True)
        config.with_colored_output(True)
    elif preset == "production":
        config.with_min_level("INFO")
        config.with_console_output(False)
        config.with_file_output(_env("LOG_FILE") or "view_bootstrap.log")
        config.with_buffering(True)
    elif preset is None:
        config.with_min_level((_env("LOG_LEVEL") or "INFO").upper())
        # stdout carries the rewritten buffer for the CLI; keep it clean.
        console = not _env_flag("DISABLE_CONSOLE", True)
        config.with_console_output(console)
        if console:
            config.with_colored_output(not _env_flag("NO_COLOR", False))
        if _env_flag("LOG_JSON", False):
            config.with_json_format(True)
        if _env("LOG_FILE"):
            config.with_file_output(_env("LOG_FILE"))
    else:
        raise ValueError(f"Unknown preset '{preset}'.")
    config.with_profiling(True)
    return config


def configure(*, config: Optional[Any] = None, preset: Optional[str] = None) -> None:
    """Adopt ``config`` or build one from ``preset`` / the environment."""

    global _ACTIVE_CONFIG
    if config and preset:
        raise ValueError("Provide either `config` or `preset`, not both.")
    _ACTIVE_CONFIG = config if config is not None else _build_config(preset)
    _LOGGER_CACHE.clear()


def get_logger(name: Optional[str] = None) -> Any:
    logger_name = name or DEFAULT_LOGGER_NAME
    if _ACTIVE_CONFIG is None:
        configure()
    if logger_name not in _LOGGER_CACHE:
        _LOGGER_CACHE[logger_name] = tl.Logger.with_config(logger_name, _ACTIVE_CONFIG)
    return _LOGGER_CACHE[logger_name]


def _emit(log: Any, level: str, message: str, data: Dict[str, Any]) -> None:
    structured = getattr(log, f"{level}_with", None)
    if structured is not None:
        structured(message, _pairs(data))
        return
    plain = getattr(log, level, None)
    if plain is None:
        raise ValueError(f"Unsupported log level '{level}'.")
    plain(f"{message} {data}")


def record_event(
    name: str,
    *,
    level: str = "info",
    data: Optional[Dict[str, Any]] = None,
    logger_name: Optional[str] = None,
) -> None:
    """Emit ``event::<name>`` with ``data`` attached as key/value pairs."""

    _emit(get_logger(logger_name), level.lower(), f"event::{name}", dict(data or {}))


class SpanHandle:
    """Collects metadata reported when the span ends or fails."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.metadata: Dict[str, str] = {}

    def add_metadata(self, key: str, value: Any) -> None:
        self.metadata[key] = str(value)


@contextmanager
def span(
    name: str,
    *,
    logger_name: Optional[str] = None,
    component: bool = False,
    metadata: Optional[Dict[str, Any]] = None,
) -> Iterator[SpanHandle]:
    """Profile a block; ``metadata`` is logger context only while it runs."""

    log = get_logger(logger_name)
    context = {key: str(value) for key, value in (metadata or {}).items()}
    for key, value in context.items():
        log.add_context(key, value)

    handle = SpanHandle(name)
    try:
        with ExitStack() as stack:
            if component:
                stack.enter_context(log.track_component(name))
            stack.enter_context(log.profile(name))
            try:
                yield handle
            except Exception as exc:
                _emit(log, "error", "span::fail", {**handle.metadata, "reason": exc})
                raise
        _emit(log, "debug", "span::done", {"span": name, **handle.metadata})
    finally:
        for key in context:
            log.remove_context(key)


__all__ = ["PRESETS", "SpanHandle", "configure", "get_logger", "record_event", "span"]
