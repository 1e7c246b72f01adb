"""Textual host for the bootstrap command."""

from .controller import TextualScaffoldAdapter, TextualUIHooks

__all__ = ["TextualScaffoldAdapter", "TextualUIHooks"]
