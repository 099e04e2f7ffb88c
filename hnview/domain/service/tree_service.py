"""Comment tree rendering service."""

import logfire

from hnview.domain.model import CommentNode
from hnview.domain.service import header_service, layout_service, link_service
from hnview.domain.service.text_service import parse_comment
from hnview.domain.value import RenderContext
from hnview.util import style

from .base import Service


class CommentTreeService(Service):
    """Domain service turning a story and its replies into pager text.

    The result is a header block (headline, info line, the story's own
    text and a separator) followed by every comment in depth-first
    pre-order. Rendering is a pure function of its arguments: nothing is
    cached between calls, so each render reflects the current width.
    """

    def render(
        self,
        root: CommentNode,
        indent_size: int,
        comment_width: int,
        screen_width: int,
    ) -> str:
        """Render a story tree.

        Args:
            root: Story node; its children are the top-level comments
            indent_size: Columns of indentation per nesting level
            comment_width: Preferred comment width, 0 to fill the screen
            screen_width: Terminal width in columns

        Returns:
            Rendered text with terminal escapes
        """
        with logfire.span(
            "comment_tree_service.render",
            story_id=root.id,
            indent_size=indent_size,
            comment_width=comment_width,
            screen_width=screen_width,
        ):
            ctx = RenderContext(
                level=0,
                indent_size=indent_size,
                comment_width=comment_width,
                screen_width=screen_width,
                original_poster=root.author,
            )

            buffer: list[str] = [self.render_header(root, layout_service.width_for(ctx))]
            self._render_thread(root.children, ctx, buffer)

            logfire.info(
                "Comment tree rendered",
                story_id=root.id,
                comment_count=root.count_replies(),
            )
            return "".join(buffer)

    def render_header(self, root: CommentNode, width: int) -> str:
        """Headline, info line, story text and separator."""
        headline = header_service.headline(
            root.title, root.domain, root.url, root.id, width
        )
        info = header_service.info_line(
            root.points, root.author, root.time_label, root.reply_count
        )
        return (
            headline
            + info
            + self.render_story_text(root.body_raw, width)
            + header_service.separator(width)
            + style.DOUBLE_NEW_LINE
        )

    @staticmethod
    def render_story_text(body_raw: str, width: int) -> str:
        """Text of a self post (Ask HN etc.), empty for link posts."""
        if not body_raw:
            return ""
        parsed = parse_comment(body_raw)
        wrapped = layout_service.wrap(parsed.text, width)
        return (
            link_service.apply_hyperlinks(wrapped, parsed.urls, parsed.occurrences)
            + style.NEW_LINE
        )

    def _render_thread(
        self, replies: list[CommentNode], ctx: RenderContext, buffer: list[str]
    ) -> None:
        """Append replies and all their descendants to buffer, pre-order.

        Walks with an explicit stack, so thread depth is not bounded by
        the interpreter's recursion limit.
        """
        stack = [(reply, ctx) for reply in reversed(replies)]
        while stack:
            node, node_ctx = stack.pop()
            self._render_comment(node, node_ctx, buffer)
            child_ctx = node_ctx.descend(node.author)
            stack.extend((reply, child_ctx) for reply in reversed(node.children))

    def _render_comment(
        self, node: CommentNode, ctx: RenderContext, buffer: list[str]
    ) -> None:
        """Append a single comment block to buffer."""
        parsed = parse_comment(node.body_raw)
        heading = header_service.comment_heading(
            node, ctx, layout_service.width_for(ctx)
        )
        body = link_service.apply_hyperlinks(
            layout_service.layout_body(parsed.text, ctx),
            parsed.urls,
            parsed.occurrences,
        )

        buffer.append(layout_service.layout_heading(heading, ctx))
        buffer.append(style.NEW_LINE)
        buffer.append(body)
        buffer.append(style.DOUBLE_NEW_LINE)
