# main.py
from __future__ import annotations

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from typing import BinaryIO

from config import DEFAULT_CONFIG, UsageError, load_keyfile
from debug import Debug
from machine import Machine
from stepping import StepMode

debug = Debug()

USAGE = "Usage: [keyfile] <infile>"
CHUNK = 4096


# ────────────────────────────────────────────────────────────────────────
#  1. CLI helpers
# ────────────────────────────────────────────────────────────────────────


class _Parser(argparse.ArgumentParser):
    # argparse exits with status 2; route through UsageError instead
    def error(self, message: str) -> None:  # type: ignore[override]
        raise UsageError(message)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = _Parser(description="Encipher or decipher a file with a three-rotor machine")
    p.add_argument("paths", nargs="+", metavar="FILE", help="[keyfile] <infile>. Without a keyfile the default settings (rotors 1 2 3, rings AAA, no plugs, start AAA) are used.")
    p.add_argument("--stepping", choices=[m.value for m in StepMode], default=StepMode.REFERENCE.value, help="Rotor stepping rules. Default: reference")
    p.add_argument("--debug", metavar="COMPONENT", action="append", default=[], choices=sorted(debug.status()), help="Log one component (repeatable).")
    p.add_argument("--log-file", metavar="PATH", type=Path, help="Also write debug messages to PATH.")
    args = p.parse_args(argv)
    if len(args.paths) > 2:
        raise UsageError(f"Expected at most two files, got {len(args.paths)}")
    return args


def encipher_file(path: str | Path, machine: Machine, out: BinaryIO) -> None:
    with open(path, "rb") as f:
        for chunk in iter(lambda: f.read(CHUNK), b""):
            out.write(machine.encipher_bytes(chunk))
    out.write(b"\n")
    out.flush()


# ────────────────────────────────────────────────────────────────────────
#  2. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None, out: BinaryIO | None = None) -> int:
    out = out if out is not None else sys.stdout.buffer
    handler = None
    try:
        args = parse_args(argv)
        debug.enable(*args.debug)
        if args.log_file:
            handler = debug.log_to(args.log_file)

        *keyfile, infile = args.paths
        cfg = load_keyfile(keyfile[0]) if keyfile else DEFAULT_CONFIG
        cfg = replace(cfg, stepping=StepMode(args.stepping))

        encipher_file(infile, Machine.from_config(cfg), out)
    except UsageError as e:
        print(e, file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 1
    except OSError as e:
        print(e, file=sys.stderr)
        return 1
    finally:
        if handler is not None:
            debug.logger.removeHandler(handler)
            handler.close()
    return 0


if __name__ == "__main__":
    sys.exit(main())
