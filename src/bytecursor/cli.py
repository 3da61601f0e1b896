from __future__ import annotations
import argparse, json, logging, sys

from colorama import just_fix_windows_console

from .binary.reader import ParseError, expect_magic, open_cursor
from .binary.hexdump import format_hexdump

log = logging.getLogger("bytecursor")


def _open(args):
    cur = open_cursor(args.input)
    if args.expect:
        expect_magic(cur, args.expect.encode("utf-8"), "file magic")
        cur.reset()
    if args.skip:
        cur.advance(args.skip)
        log.debug("skipped to offset %d", cur.tell())
    return cur


def _use_color(mode: str) -> bool:
    if mode == "always":
        return True
    if mode == "never":
        return False
    return sys.stdout.isatty()


def cmd_info(args):
    cur = _open(args)
    print(json.dumps(cur.snapshot().model_dump(mode="json"), indent=2))
    return 0


def cmd_dump(args):
    cur = _open(args)
    color = _use_color(args.color)
    if color:
        just_fix_windows_console()
    print(format_hexdump(cur, color=color, limit=args.rows))
    return 0


def build_parser():
    p = argparse.ArgumentParser(prog="bytecursor", description="Inspect binary files with a byte cursor")
    p.add_argument("-v", "--verbose", action="store_true", help="Log debug output to stderr")
    sub = p.add_subparsers(dest="cmd")

    sp = sub.add_parser("info", help="print cursor state as JSON")
    sp.add_argument("input", help="Path to a binary file")
    sp.add_argument("--skip", type=int, default=0, help="Advance the cursor N bytes first (clamped at end)")
    sp.add_argument("--expect", default=None, help="Fail unless the file starts with this magic string")
    sp.set_defaults(func=cmd_info)

    sp = sub.add_parser("dump", help="print a hex dump with the cursor position")
    sp.add_argument("input", help="Path to a binary file")
    sp.add_argument("--skip", type=int, default=0, help="Advance the cursor N bytes first, e.g. past a header")
    sp.add_argument("--expect", default=None, help="Fail unless the file starts with this magic string, e.g. RITE")
    sp.add_argument("--rows", type=int, default=None, help="Only render the first N rows")
    sp.add_argument("--color", default="auto", choices=["auto", "always", "never"])
    sp.set_defaults(func=cmd_dump)

    return p


def main(argv=None):
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    log.setLevel(logging.DEBUG if ns.verbose else logging.WARNING)
    if not hasattr(ns, "func"):
        p.print_help()
        return 2
    if ns.skip < 0:
        p.error("--skip must be non-negative")
    try:
        return ns.func(ns)
    except (ParseError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
