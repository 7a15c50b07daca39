"""CLI app entrypoint and error mapping."""

from __future__ import annotations

import sys


def main(argv: list[str] | None = None) -> int:
    import newgo.cli as cli

    parser = cli.build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        cli.logging.basicConfig(level=cli.logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        return cli._run_new(args)
    except Exception as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1


__all__ = ["main"]
