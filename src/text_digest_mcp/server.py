"""Main FastMCP server: mounts the digest sub-server."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastmcp import FastMCP

from . import tracing
from .tools.summarize import digest_server

logger = logging.getLogger(__name__)


@asynccontextmanager
async def _lifespan(server: FastMCP):
    """Startup/shutdown hook: configures and flushes tracing."""
    tracing.setup()
    yield {}
    tracing.shutdown()
    logger.info("Lifespan shutdown complete")


app = FastMCP(
    "text-digest",
    instructions=(
        "Deterministic text digests: summarize text or text files into one of "
        "15 modes (brief, executive, timeline, action items, ...) and 5 formats."
    ),
    lifespan=_lifespan,
)

app.mount(digest_server)


def main() -> None:
    """Entry-point for ``text-digest-mcp`` console script."""
    app.run()


if __name__ == "__main__":
    main()
