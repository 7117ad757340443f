#!/usr/bin/env python3
"""Fetch one collection resource and print what the store ends up holding.

Usage
-----
Point the script at a running web service and run::

    export ESP_BASE_URL="http://localhost:8080"
    python scripts/dump_collection.py students

Options::

    --base-url URL      Override ESP_BASE_URL
    --json              Output the raw items as JSON
    --typed             Print the items through the Student/Course models
    --verbose, -v       Enable debug logging
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from pathlib import Path

# Allow running from the repo root without installing the package.
_repo = Path(__file__).resolve().parent.parent
_src = _repo / "src"
if _src.is_dir():
    sys.path.insert(0, str(_src))

from espclient import Course, EspClient, EspConfig, EspError, Student, parse_items  # noqa: E402

_TYPED_MODELS = {"students": Student, "courses": Course}


def _section(title: str) -> str:
    line = "=" * 60
    return f"\n{line}\n  {title}\n{line}"


async def main() -> int:
    parser = argparse.ArgumentParser(description="Dump a collection resource from the enrollment web service")
    parser.add_argument("resource", nargs="?", default="students", help="Collection name (default: students)")
    parser.add_argument("--base-url", help="Override ESP_BASE_URL")
    parser.add_argument("--json", action="store_true", dest="json_mode", help="Output raw items as JSON")
    parser.add_argument("--typed", action="store_true", help="Print items through the typed models")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")
    else:
        logging.basicConfig(level=logging.WARNING)

    overrides = {"base_url": args.base_url} if args.base_url else {}
    try:
        config = EspConfig.from_env(**overrides)
    except EspError as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return 2

    async with EspClient(config) as client:
        try:
            store = client.collection(args.resource)
        except EspError as exc:
            print(str(exc), file=sys.stderr)
            return 2
        await store.wait()

    if store.last_error is not None:
        print(f"{store.resource_path}: fetch failed: {store.last_error}", file=sys.stderr)
        return 1

    if args.json_mode:
        print(json.dumps(store.items, indent=2, default=str))
        return 0

    print(_section(f"{store.resource_path} ({len(store.items)} items)"))
    model = _TYPED_MODELS.get(args.resource)
    if args.typed and model is not None:
        try:
            records = parse_items(model, store.items)
        except EspError as exc:
            print(f"  items do not match {model.__name__}: {exc}", file=sys.stderr)
            return 1
        for record in records:
            print(f"  {record.model_dump(exclude={'raw'})}")
    else:
        for item in store.items:
            print(f"  {item}")
    return 0


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
