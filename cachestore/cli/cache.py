"""CLI for inspecting and editing a cache store.

Usage::

    # Read a key (decoded JSON, or the raw stored text with --raw)
    python -m cachestore.cli.cache get session:42
    python -m cachestore.cli.cache get session:42 --raw

    # Write a JSON value, optionally with a TTL in seconds
    python -m cachestore.cli.cache set session:42 '{"user": "ada"}' --ttl 300

    # Delete, list, inspect expiry, flush
    python -m cachestore.cli.cache del session:42 session:43
    python -m cachestore.cli.cache keys 'session:*'
    python -m cachestore.cli.cache ttl session:42
    python -m cachestore.cli.cache flush

Logging follows ``LOG_LEVEL`` and ``APP_ENV`` (or ``--log-level``).
The engine comes from ``REDIS_URL`` (or ``--url``).  Without either the
in-memory engine is used, which only lives for the duration of one command.
"""

from __future__ import annotations

import argparse
import asyncio
import json
import sys

from cachestore.config import Settings
from cachestore.main import build_store, close_store
from cachestore.providers.cache.redis_store import RedisCacheStore
from cachestore.utils.errors import CacheStoreError, EngineError


# ---------------------------------------------------------------------------
# Subcommand handlers
# ---------------------------------------------------------------------------


async def _handle_get(args: argparse.Namespace, store: RedisCacheStore) -> int:
    value = await store.get(args.key, {"parse": not args.raw})
    if value is None:
        print(f"(nil) {args.key}", file=sys.stderr)
        return 1
    print(value if args.raw else json.dumps(value, indent=2))
    return 0


async def _handle_set(args: argparse.Namespace, store: RedisCacheStore) -> int:
    try:
        value = json.loads(args.value)
    except json.JSONDecodeError as exc:
        print(f"Error: value is not valid JSON: {exc.msg}", file=sys.stderr)
        return 1

    options = {"ttl": args.ttl} if args.ttl is not None else None
    await store.set(args.key, value, options)
    print("OK")
    return 0


async def _handle_del(args: argparse.Namespace, store: RedisCacheStore) -> int:
    removed = await store.delete(args.keys)
    print(f"Removed {removed} key(s)")
    return 0


async def _handle_keys(args: argparse.Namespace, store: RedisCacheStore) -> int:
    for key in sorted(await store.keys(args.pattern)):
        print(key)
    return 0


async def _handle_ttl(args: argparse.Namespace, store: RedisCacheStore) -> int:
    remaining = await store.ttl(args.key)
    if remaining == -2:
        print(f"(nil) {args.key}", file=sys.stderr)
        return 1
    print("no expiry" if remaining == -1 else f"{remaining}s")
    return 0


async def _handle_flush(args: argparse.Namespace, store: RedisCacheStore) -> int:
    await store.reset()
    print("Flushed")
    return 0


_HANDLERS = {
    "get": _handle_get,
    "set": _handle_set,
    "del": _handle_del,
    "keys": _handle_keys,
    "ttl": _handle_ttl,
    "flush": _handle_flush,
}


async def run_command(args: argparse.Namespace, store: RedisCacheStore) -> int:
    """Dispatch *args* against *store*; cache and engine errors map to exit code 1."""
    handler = _HANDLERS[args.command]
    try:
        return await handler(args, store)
    except (CacheStoreError, EngineError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


async def _run(args: argparse.Namespace) -> int:
    overrides: dict[str, str] = {}
    if args.url:
        overrides["redis_url"] = args.url
    if args.log_level:
        overrides["log_level"] = args.log_level
    settings = Settings(**overrides)
    # Command output shares stdout with the log renderer.
    if "log_level" not in settings.model_fields_set:
        settings = settings.model_copy(update={"log_level": "WARNING"})
    store = await build_store(settings)
    try:
        return await run_command(args, store)
    finally:
        await close_store(store)


def _build_parser() -> argparse.ArgumentParser:
    """Build the argparse parser for the cache CLI."""
    parser = argparse.ArgumentParser(
        prog="python -m cachestore.cli.cache",
        description="Inspect and edit a cachestore-managed key-value engine.",
    )
    parser.add_argument("--url", default="", help="Redis URL (default: $REDIS_URL)")
    parser.add_argument(
        "--log-level", default=None, help="Log level (default: $LOG_LEVEL, else WARNING)"
    )
    subparsers = parser.add_subparsers(dest="command", help="Cache commands")

    get_parser = subparsers.add_parser("get", help="Read a key")
    get_parser.add_argument("key")
    get_parser.add_argument(
        "--raw", action="store_true", help="Print the stored JSON text without decoding"
    )

    set_parser = subparsers.add_parser("set", help="Write a JSON value")
    set_parser.add_argument("key")
    set_parser.add_argument("value", help="JSON-encoded value")
    set_parser.add_argument("--ttl", type=int, default=None, help="Expiry in seconds")

    del_parser = subparsers.add_parser("del", help="Delete one or more keys")
    del_parser.add_argument("keys", nargs="+")

    keys_parser = subparsers.add_parser("keys", help="List keys matching a glob pattern")
    keys_parser.add_argument("pattern", nargs="?", default="*")

    ttl_parser = subparsers.add_parser("ttl", help="Show remaining expiry of a key")
    ttl_parser.add_argument("key")

    subparsers.add_parser("flush", help="Remove every key (irreversible)")

    return parser


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    """CLI entry point for the cache tool."""
    parser = _build_parser()
    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    sys.exit(asyncio.run(_run(args)))


if __name__ == "__main__":
    main()
