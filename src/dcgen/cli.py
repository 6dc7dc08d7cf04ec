"""
Command line entry point: render a saved draft as contract text.

    dcgen draft.yaml              print the contract
    dcgen draft.json -o out.yaml  write it to a file
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

import yaml

from dcgen import __version__
from dcgen.backends import generate, save_contract_file
from dcgen.serialization import store_from_json, store_from_yaml
from dcgen.store import FieldStore

logger = logging.getLogger(__name__)


def load_draft(path: str) -> FieldStore:
    """Load a draft file; `.json` is read as JSON, anything else as YAML."""
    with open(path, "r", encoding="utf-8") as f:
        content = f.read()
    if os.path.splitext(path)[1].lower() == ".json":
        return store_from_json(content)
    return store_from_yaml(content)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dcgen",
        description="Generate a data contract from a saved draft",
    )
    parser.add_argument("draft", help="Path to a draft file (YAML, or JSON with a .json extension)")
    parser.add_argument("-o", "--output", help="Write the contract to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        store = load_draft(args.draft)
    except (OSError, yaml.YAMLError, ValueError, TypeError) as e:
        logger.debug("Failed to load draft %s", args.draft, exc_info=True)
        print(f"dcgen: cannot load draft {args.draft}: {e}", file=sys.stderr)
        return 1

    if args.output:
        try:
            save_contract_file(store.metadata, store.fields, args.output)
        except OSError as e:
            logger.debug("Failed to write contract %s", args.output, exc_info=True)
            print(f"dcgen: cannot write contract {args.output}: {e}", file=sys.stderr)
            return 1
    else:
        print(generate(store.metadata, store.fields))
    return 0


if __name__ == "__main__":
    sys.exit(main())
