"""Command line entry point that prints the .NET SDK segment."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from sdkpeek import dotnet

DEFAULT_SYMBOL = "•NET "


def render(
    current_dir: str | Path,
    heuristic: bool = True,
    symbol: str = DEFAULT_SYMBOL,
) -> str:
    """Render the segment for a directory, or an empty string if nothing applies."""
    current_dir = Path(current_dir).resolve()
    repo_root = dotnet.find_repo_root(current_dir)
    version = dotnet.detect_dotnet_version(current_dir, repo_root, heuristic)
    if version is None:
        return ""
    return f"via {symbol}{version} "


def main(argv: list[str] | None = None) -> int:
    """Print the .NET SDK segment for the given or current directory."""
    parser = argparse.ArgumentParser(
        prog="sdkpeek", description="Show the .NET SDK version in use."
    )
    parser.add_argument("--path", default=".", help="directory to inspect")
    parser.add_argument(
        "--no-heuristic",
        dest="heuristic",
        action="store_false",
        help="always ask `dotnet --version`",
    )
    parser.add_argument("--symbol", default=DEFAULT_SYMBOL, help="symbol to show")
    args = parser.parse_args(argv)
    sys.stdout.write(render(args.path, args.heuristic, args.symbol))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())