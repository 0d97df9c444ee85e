#!/usr/bin/env python3
"""Backfill portfolio fields added after portfolios were first created.

Fills ``intro`` and ``implementation`` with empty strings and gallery slots
``image1``..``image8`` with explicit nulls wherever they were never set.
Existing values are left alone, so the script can be re-run safely.
"""

import asyncio
import sys

import logfire

from folio.application.usecase.portfolio import (
    BackfillPortfolioFieldsRequest,
    BackfillPortfolioFieldsUseCase,
)
from folio.config import Settings
from folio.util.di.container import create_container
from folio.util.observability import configure_logfire


async def migrate() -> int:
    container = create_container()
    try:
        async with container() as request_container:
            use_case = await request_container.get(BackfillPortfolioFieldsUseCase)
            report = await use_case.execute(BackfillPortfolioFieldsRequest())
    finally:
        await container.close()

    logfire.info(
        "Portfolio migration complete",
        scanned=report.scanned,
        updated=report.updated,
        failed=report.failed,
    )
    return 0


def main() -> int:
    configure_logfire(Settings())
    try:
        return asyncio.run(migrate())
    except Exception as e:
        logfire.error(
            "Portfolio migration failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        return 1


if __name__ == "__main__":
    sys.exit(main())
