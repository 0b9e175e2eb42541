from __future__ import annotations

import asyncio
import logging
import os
import sys
from typing import Any, Dict, Optional, TextIO

import httpx

from common.config import ConfigError, FeedConfig, load_config_from_env
from common.log import setup_logger
from common.transport import HttpTransport
from presenter.display import ConsoleTable
from presenter.presenter import LocationsPresenter


ENV_LOG_LEVEL = "LOCATIONS_LOG_LEVEL"

logger = logging.getLogger(__name__)


async def _refresh_once(
    config: FeedConfig,
    client: Optional[httpx.AsyncClient],
    out: Optional[TextIO],
) -> Dict[str, Any]:
    display = ConsoleTable(out)
    async with HttpTransport(
        timeout=config.timeout_seconds,
        user_agent=config.user_agent,
        client=client,
    ) as transport:
        presenter = LocationsPresenter(transport, config, display=display)
        await presenter.refresh()

    snap = presenter.snapshot()
    return {
        "ok": True,
        "count": len(snap.items),
        "version": snap.version,
    }


def run_once(
    config: Optional[FeedConfig] = None,
    *,
    client: Optional[httpx.AsyncClient] = None,
    out: Optional[TextIO] = None,
) -> Dict[str, Any]:
    """Refresh the list once and render it to `out` (stdout by default)."""
    cfg = config or load_config_from_env()
    return asyncio.run(_refresh_once(cfg, client, out))


def main() -> int:
    setup_logger(level=os.environ.get(ENV_LOG_LEVEL, "INFO").upper())
    try:
        summary = run_once()
    except ConfigError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    logger.info("Done: %d locations", summary["count"])
    return 0


if __name__ == "__main__":
    sys.exit(main())
