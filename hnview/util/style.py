"""Terminal style helpers.

Pure functions from text to decorated text. Every helper returns a new
string; nothing here holds state.
"""

import re

from rich.cells import cell_len

NORMAL = "\033[0m"
BOLD = "\033[1m"
DIMMED = "\033[2m"
ITALIC = "\033[3m"
UNDERLINE = "\033[4m"

RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"
BLUE = "\033[34m"
PURPLE = "\033[35m"
TEAL = "\033[36m"
WHITE = "\033[37m"

# OSC 8 hyperlink, terminated with ST
LINK_START = "\033]8;;"
LINK_END = "\033\\"

NEW_LINE = "\n"
DOUBLE_NEW_LINE = "\n\n"

# SGR sequences and OSC 8 hyperlink sequences are zero-width
SGR_PATTERN = re.compile(r"\033\[[0-9;]*m")
ESCAPE_PATTERN = re.compile(r"\033\[[0-9;]*m|\033\]8;[^\033\a]*;[^\033\a]*(?:\033\\|\a)")


def bold(text: str) -> str:
    return BOLD + text + NORMAL


def dimmed(text: str) -> str:
    return DIMMED + text + NORMAL


def underline(text: str) -> str:
    return UNDERLINE + text + NORMAL


def red(text: str) -> str:
    return RED + text + NORMAL


def green(text: str) -> str:
    return GREEN + text + NORMAL


def yellow(text: str) -> str:
    return YELLOW + text + NORMAL


def blue(text: str) -> str:
    return BLUE + text + NORMAL


def purple(text: str) -> str:
    return PURPLE + text + NORMAL


def teal(text: str) -> str:
    return TEAL + text + NORMAL


def white(text: str) -> str:
    return WHITE + text + NORMAL


def hyperlink(url: str, text: str) -> str:
    """Wrap text in a clickable terminal hyperlink pointing at url."""
    return LINK_START + url + LINK_END + text + LINK_START + LINK_END


def strip_escapes(text: str) -> str:
    """Remove all style and hyperlink escape sequences."""
    return ESCAPE_PATTERN.sub("", text)


def visible_len(text: str) -> int:
    """Number of terminal cells text occupies once escapes are removed."""
    return cell_len(strip_escapes(text))
