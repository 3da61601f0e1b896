#!/usr/bin/env python3
# Take a container header off the front of a file and dump what follows.
import sys
from pathlib import Path
from bytecursor.binary.reader import open_cursor, read_exact, ParseError
from bytecursor.binary.hexdump import format_hexdump

def main(path: Path, header_size: int = 20) -> int:
    try:
        cur = open_cursor(path)
        header = read_exact(cur, header_size, "header")
    except (ParseError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    print("header:", header.hex(" "))
    print(format_hexdump(cur, color=sys.stdout.isatty()))
    return 0

if __name__ == "__main__":
    p = Path(sys.argv[1] if len(sys.argv) > 1 else "examples/puts.mrb")
    n = int(sys.argv[2]) if len(sys.argv) > 2 else 20
    raise SystemExit(main(p, n))
