"""Print the SDL of the media item schema extended with Performance Lab fields."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from graphql import print_schema

from perflab_graphql.config import load_settings
from perflab_graphql.core.app import create_schema
from perflab_graphql.logging import configure_logging
from perflab_graphql.media.library import InMemoryMediaLibrary


def render_schema() -> str:
    """Return the schema SDL built from the current settings."""
    settings = load_settings()
    configure_logging(settings)
    schema = create_schema(InMemoryMediaLibrary(), settings)
    return print_schema(schema)


def parse_args(argv: list[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Print the GraphQL schema as SDL.")
    parser.add_argument("--output", type=Path, help="Write the SDL to this file instead of stdout.")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv if argv is not None else sys.argv[1:])
    sdl = render_schema()
    if args.output is None:
        print(sdl)
    else:
        args.output.write_text(sdl + "\n", encoding="utf-8")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
