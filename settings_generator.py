# settings_generator.py
from __future__ import annotations

import argparse
import sys
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from config import Configuration, dump_keyfile
from keyboard_and_plugboard import MAX_PAIRS
from rotor_and_reflector import ALPHABET, ROTORS, SIZE

DEFAULT_PAIRS = 10

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, MAX_PAIRS)
    pool = list(ALPHABET)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def random_configuration(rng: Random | SystemRandom, pairs: int = DEFAULT_PAIRS) -> Configuration:
    """Three distinct wheels, random rings, plugs and start letters."""
    order = rng.sample(range(len(ROTORS)), 3)
    ring = [rng.randrange(SIZE) for _ in range(3)]
    start = [rng.randrange(SIZE) for _ in range(3)]
    return Configuration(
        order=(order[0], order[1], order[2]),
        ring=(ring[0], ring[1], ring[2]),
        plugs=tuple(choose_pairs(pairs, rng)),
        start=(start[0], start[1], start[2]),
    )


def parse_cli(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random daily keyfile")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--plugs", type=int, default=DEFAULT_PAIRS, choices=range(MAX_PAIRS + 1), metavar=f"0-{MAX_PAIRS}", help=f"Number of plug pairs (default: {DEFAULT_PAIRS})")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("keyfile.txt"),
        help="Destination keyfile (default: keyfile.txt)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    args = parse_cli(argv)
    cfg = random_configuration(build_rng(args.seed), args.plugs)

    try:
        args.outfile.write_text(dump_keyfile(cfg), encoding="utf-8")
    except OSError as e:
        print(e, file=sys.stderr)
        return 1

    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {' '.join(ROTORS[i].name for i in cfg.order)}\n"
        f"   rings       : {' '.join(ALPHABET[r] for r in cfg.ring)}\n"
        f"   start       : {cfg.window}\n"
        f"   plug pairs  : {len(cfg.plugs)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
