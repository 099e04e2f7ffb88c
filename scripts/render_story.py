#!/usr/bin/env python3
"""Render a story JSON file (feed shape) to stdout.

Usage:
    render_story.py story.json | less -R
    curl -s https://api.hackerwebapp.com/item/8863 | render_story.py -
"""

import asyncio
import json
import sys

from hnview.application.usecase.comment import (
    RenderCommentsRequest,
    RenderCommentsUseCase,
)
from hnview.config import Settings
from hnview.domain.model import CommentNode
from hnview.util.di.container import create_container
from hnview.util.logging import setup_logging
from hnview.util.observability import configure_logfire


async def render(path: str) -> str:
    """Load the story at path ("-" for stdin) and render it."""
    if path == "-":
        payload = json.load(sys.stdin)
    else:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)

    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(RenderCommentsUseCase)
            response = await use_case.execute(
                RenderCommentsRequest(story=CommentNode.model_validate(payload))
            )
            return response.text
    finally:
        await container.close()


def main() -> int:
    if len(sys.argv) != 2:
        print(__doc__, file=sys.stderr)
        return 2

    settings = Settings()
    configure_logfire(settings, console=False)
    setup_logging(settings)
    sys.stdout.write(asyncio.run(render(sys.argv[1])))
    return 0


if __name__ == "__main__":
    sys.exit(main())
