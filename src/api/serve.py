# This file launches the GCD web service under uvicorn.
# It exists so the listen address can come from config or the command line.
# A failed bind (address in use, permission denied) ends the process with a non-zero status.

from __future__ import annotations

import argparse
import logging

import uvicorn

from src.api.api_config import get_api_config
from src.common.logging import configure_logging

LOGGER = logging.getLogger("gcd.serve")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    config = get_api_config()
    parser = argparse.ArgumentParser(description="Serve the GCD calculator web form")
    parser.add_argument("--host", default=config.host, help=f"Bind address (default: {config.host})")
    parser.add_argument("--port", type=int, default=config.port, help=f"Bind port (default: {config.port})")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    config = get_api_config()
    configure_logging(config.log_level)

    LOGGER.info("Serving on http://%s:%s... environment=%s", args.host, args.port, config.environment)
    uvicorn.run(
        "src.api.app:app",
        host=args.host,
        port=args.port,
        log_level=config.log_level.lower(),
        reload=False,
    )


if __name__ == "__main__":
    main()
