"""Console styling and status glyphs for pondo output."""

from typing import Dict

from rich.console import Console
from rich.theme import Theme

from .config import ConfigModel

PONDO_THEME = Theme({
    'success': "green",
    'warning': "yellow",
    'error': "red bold",
    'muted': "dim",
    'header': "bold",
    'task_id': "cyan",
    'todo_pending': "yellow",
    'todo_completed': "green",
})

EMOJI_GLYPHS: Dict[str, str] = {
    'pending': "⏳",
    'completed': "✅",
    'success': "✅",
    'warning': "⚠️ ",
    'failure': "❌",
    'list': "📋",
    'empty': "📝",
}

ASCII_GLYPHS: Dict[str, str] = {
    'pending': "[ ]",
    'completed': "[x]",
    'success': "OK",
    'warning': "Warning:",
    'failure': "Error:",
    'list': "",
    'empty': "",
}


def get_glyphs(config: ConfigModel) -> Dict[str, str]:
    """Get the glyph table for the configured emoji preference."""
    return EMOJI_GLYPHS if config.use_emoji else ASCII_GLYPHS


def glyph(config: ConfigModel, name: str, separator: str = " ") -> str:
    """Return ``name``'s glyph followed by ``separator``, or nothing if it is blank."""
    symbol = get_glyphs(config)[name]
    return f"{symbol}{separator}" if symbol else ""


def get_console(config: ConfigModel, stderr: bool = False) -> Console:
    """Get a themed console writing to stdout (or stderr).

    Emoji shortcodes are disabled so ``:text:`` in task names is printed
    literally, and lines are never wrapped.
    """
    return Console(
        theme=PONDO_THEME,
        stderr=stderr,
        no_color=config.no_color,
        emoji=False,
        highlight=False,
        soft_wrap=True,
    )
