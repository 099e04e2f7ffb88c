"""Story header and comment heading formatting."""

from hnview.domain.model import CommentNode
from hnview.domain.service import layout_service, link_service
from hnview.domain.value import AuthorRole, RenderContext
from hnview.util import style

MODERATORS = frozenset({"dang", "sctb"})

ROLE_COLORS = {
    AuthorRole.MODERATOR: style.green,
    AuthorRole.ORIGINAL_POSTER: style.red,
    AuthorRole.PARENT_POSTER: style.purple,
}

REPLY_MARKER = " ::"
REPLY_ARROW = "⤶"


def info_line(points: int, author: str, time_label: str, reply_count: int) -> str:
    return (
        style.dimmed(
            f"{points} points by {author} {time_label} • {reply_count} comments"
        )
        + style.NEW_LINE
    )


def headline(title: str, domain: str, url: str, item_id: int, width: int) -> str:
    """Story title followed by a clickable (domain).

    Self posts have no domain; they show and link to their own
    discussion page instead.
    """
    if domain:
        label, target = domain, url
    else:
        label = "item?id=" + str(item_id)
        target = link_service.item_url(item_id)

    wrapped = layout_service.wrap(title + " (" + label + ")", width)

    # The label closes the headline; a title may mention the domain too
    position = wrapped.rfind(label)
    wrapped = (
        wrapped[:position]
        + style.hyperlink(target, label)
        + wrapped[position + len(label) :]
    )
    return wrapped + style.NEW_LINE


def separator(width: int) -> str:
    return "-" * width


def author_role(author: str, original_poster: str, parent_poster: str) -> AuthorRole:
    """Classify an author; moderators win over OP, OP wins over PP."""
    if author in MODERATORS:
        return AuthorRole.MODERATOR
    if author and author == original_poster:
        return AuthorRole.ORIGINAL_POSTER
    if author and author == parent_poster:
        return AuthorRole.PARENT_POSTER
    return AuthorRole.NONE


def label_author(author: str, original_poster: str, parent_poster: str) -> str:
    role = author_role(author, original_poster, parent_poster)
    label = style.bold(author)
    if role is AuthorRole.NONE:
        return label
    return label + ROLE_COLORS[role](role.value)


def reply_marker(level: int, replies: int) -> str:
    """Reply count shown on top-level comments only."""
    if level != 0:
        return ""
    count = f"  {replies} {REPLY_ARROW}" if replies > 1 else ""
    return style.underline(style.dimmed(REPLY_MARKER + count))


def underline_filler(width: int, *parts: str) -> str:
    """Underlined blanks extending a heading made of parts to width columns."""
    length = width - sum(style.visible_len(part) for part in parts)
    if length <= 0:
        return ""
    return style.dimmed(style.underline(" " * length))


def comment_heading(node: CommentNode, ctx: RenderContext, width: int) -> str:
    """Author, time and, for top-level comments, reply count and underline."""
    author = label_author(node.author, ctx.original_poster, ctx.parent_poster) + " "
    time_label = style.dimmed(node.time_label)

    if ctx.level != 0:
        return author + time_label

    time_label = style.underline(time_label)
    replies = style.underline(reply_marker(ctx.level, node.count_replies()))
    return author + time_label + replies + underline_filler(
        width, author, time_label, replies
    )
