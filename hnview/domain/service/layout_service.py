"""Comment layout: widths, indentation and wrapping.

Widths here are total line widths, indentation included. A nested comment
at level n starts indent_size * n columns to the right, so with a fixed
comment_width the line grows by the same amount and the text column keeps
its width at every depth.
"""

from hnview.domain.value import RenderContext
from hnview.util import style

MIN_COMMENT_WIDTH = 40

BAR = "▎"
BAR_COLORS = (
    style.RED,
    style.YELLOW,
    style.GREEN,
    style.BLUE,
    style.TEAL,
    style.PURPLE,
    style.WHITE,
)


def adjusted_width(
    level: int, indent_size: int, comment_width: int, screen_width: int
) -> int:
    """Line width for a comment at the given level.

    comment_width == 0 uses whatever the screen leaves after indentation.
    A preferred width never overflows the screen; the screen-derived width
    never drops below MIN_COMMENT_WIDTH.
    """
    usable = screen_width - indent_size * level

    if comment_width == 0:
        return max(usable, MIN_COMMENT_WIDTH)
    if usable < comment_width:
        return max(usable, MIN_COMMENT_WIDTH)

    return comment_width + indent_size * level


def width_for(ctx: RenderContext) -> int:
    return adjusted_width(
        ctx.level, ctx.indent_size, ctx.comment_width, ctx.screen_width
    )


def indent_block(level: int, indent_size: int) -> str:
    """Left padding with a depth-colored bar, used for comment bodies."""
    if level == 0:
        return ""
    color = BAR_COLORS[(level - 1) % len(BAR_COLORS)]
    return " " * (indent_size * level) + style.NORMAL + color + BAR + style.NORMAL + " "


def indent_block_without_bar(level: int, indent_size: int) -> str:
    """Blank padding as wide as indent_block, used for comment headings."""
    if level == 0:
        return ""
    return " " * (indent_size * level + 2)


def _apply_sgr(active: list[str], segment: str) -> list[str]:
    """Styles still open after segment, given those open before it."""
    for code in style.SGR_PATTERN.findall(segment):
        if code in (style.NORMAL, "\033[m"):
            active = []
        else:
            active = active + [code]
    return active


def _wrap_line(line: str, available: int) -> list[str]:
    """Greedy word wrap of a single line on visible width.

    Lines that fit are returned untouched. Spaces at a break are dropped.
    Words wider than the available width get a line of their own and are
    never split.
    """
    if style.visible_len(line) <= available:
        return [line]

    segments: list[str] = []
    current: list[str] = []
    current_len = 0
    for word in line.split(" "):
        word_len = style.visible_len(word)
        if not current:
            if not word and segments:
                continue
            current, current_len = [word], word_len
        elif current_len + 1 + word_len <= available:
            current.append(word)
            current_len += 1 + word_len
        else:
            segments.append(" ".join(current).rstrip(" "))
            current, current_len = ([word], word_len) if word else ([], 0)

    if current or not segments:
        segments.append(" ".join(current))
    return segments


def wrap(text: str, width: int, pad: str = "") -> str:
    """Wrap text to width columns, prefixing every line with pad.

    Escape sequences are zero-width. Styles left open at a line break are
    reset before the newline and re-opened after the next line's pad, so
    the pad's own colors never bleed into the text and vice versa.

    Args:
        text: Text to wrap, may contain SGR escapes and newlines
        width: Total line width including the pad
        pad: Prefix for every output line

    Returns:
        Wrapped text, lines joined with newlines, no trailing newline
    """
    available = max(width - style.visible_len(pad), 1)
    active: list[str] = []
    lines = []
    for line in text.split(style.NEW_LINE):
        for segment in _wrap_line(line, available):
            reopen = "".join(active)
            active = _apply_sgr(active, segment)
            close = style.NORMAL if active else ""
            lines.append(pad + reopen + segment + close)
    return style.NEW_LINE.join(lines)


def layout_body(text: str, ctx: RenderContext) -> str:
    return wrap(text, width_for(ctx), indent_block(ctx.level, ctx.indent_size))


def layout_heading(heading: str, ctx: RenderContext) -> str:
    return wrap(
        heading, width_for(ctx), indent_block_without_bar(ctx.level, ctx.indent_size)
    )
