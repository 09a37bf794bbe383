"""Entry points that drive an address book."""

from .script_handler import ScriptHandler, DEMO_SCRIPT, main

__all__ = ["ScriptHandler", "DEMO_SCRIPT", "main"]
