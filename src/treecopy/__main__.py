"""Entry point: python -m treecopy {mkdir,cp} ..."""

from __future__ import annotations

import argparse
import json
import sys

from treecopy.infrastructure.config import DEFAULT_FORCE
from treecopy.infrastructure.logger import install_exception_hooks, setup_logging
from treecopy.operations import try_cp, try_mkdir
from treecopy.types import CopyOptions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="treecopy", description="Create directories and copy file trees")
    sub = parser.add_subparsers(dest="command", required=True)

    mkdir_parser = sub.add_parser("mkdir", help="Create a directory and any missing parents")
    mkdir_parser.add_argument("path")

    cp_parser = sub.add_parser("cp", help="Copy a file, directory or symlink")
    cp_parser.add_argument("-f", "--force", action="store_true", default=DEFAULT_FORCE, help="Overwrite existing files")
    cp_parser.add_argument("source")
    cp_parser.add_argument("dest")
    return parser


def main(argv: list[str] | None = None) -> int:
    setup_logging()
    install_exception_hooks()
    args = build_parser().parse_args(argv)

    if args.command == "mkdir":
        result = try_mkdir(args.path)
    else:
        result = try_cp(args.source, args.dest, CopyOptions(force=args.force))

    print(json.dumps(result.model_dump(mode="json", exclude_none=True), indent=2))
    return 0 if result.success else 1


if __name__ == "__main__":
    sys.exit(main())
