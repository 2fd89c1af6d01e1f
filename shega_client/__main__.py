"""Status probe CLI — `python -m shega_client {health,scheduler,scraping}`.

Invariants:
    - Exit code 0 on success, 1 on APIError (message printed to stderr)
    - Config and logging set up once before the call

Design Decisions:
    - argparse subcommand per probe; output is the validated payload as JSON
"""

import argparse
import asyncio
import json
import sys

from shega_client.api import health, scheduler, scraping
from shega_client.config import resolve_config
from shega_client.core.errors import APIError
from shega_client.infrastructure.http_client import APIClient
from shega_client.infrastructure.observability import setup_logging

PROBES = {
    "health": health.get_health,
    "scheduler": scheduler.get_status,
    "scraping": scraping.get_all_status,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shega-client",
        description="Query status endpoints of the Shega analytics API.",
    )
    parser.add_argument("probe", choices=sorted(PROBES))
    parser.add_argument(
        "--base-url", help="Override the configured API base URL",
    )
    parser.add_argument(
        "--indent", type=int, default=2, help="JSON indent (default: 2)",
    )
    return parser


async def run_probe(probe: str, client: APIClient) -> dict:
    result = await PROBES[probe](client)
    return result.model_dump(mode="json")


async def _main(args: argparse.Namespace) -> int:
    config = resolve_config()
    if args.base_url:
        config = config.model_copy(update={"base_url": args.base_url.rstrip("/")})
    setup_logging(config.log_level, config.log_format)

    async with APIClient(config) as client:
        try:
            payload = await run_probe(args.probe, client)
        except APIError as e:
            print(f"error: {e.message}", file=sys.stderr)
            return 1
    print(json.dumps(payload, indent=args.indent, ensure_ascii=False))
    return 0


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return asyncio.run(_main(args))


if __name__ == "__main__":
    sys.exit(main())
