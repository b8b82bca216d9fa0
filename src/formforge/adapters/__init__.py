"""Rendering adapters that drive a Form through its public contract."""

from formforge.adapters.terminal import TerminalFormRunner

__all__ = ["TerminalFormRunner"]
