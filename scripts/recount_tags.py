#!/usr/bin/env python3
"""Recompute every tag's stored journal count.

Counts are kept in sync on each write; this repairs any drift left by a
write whose count update failed.
"""

import asyncio
import sys

import logfire

from folio.config import Settings
from folio.domain.service import TagCountService
from folio.util.di.container import create_container
from folio.util.observability import configure_logfire


async def recount() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            service = await request_container.get(TagCountService)
            updated = await service.recount_all()
    finally:
        await container.close()

    logfire.info("Tag recount complete", updated=updated)
    return 0


def main() -> int:
    configure_logfire(Settings())
    try:
        return asyncio.run(recount())
    except Exception as e:
        logfire.error(
            "Tag recount failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
