# config.py
from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path

from debug import Debug
from keyboard_and_plugboard import MAX_PAIRS, Keyboard, Plugboard
from rotor_and_reflector import ALPHABET, ROTORS, SIZE
from stepping import StepMode

debug = Debug()


class UsageError(ValueError):
    """Bad arguments, a malformed keyfile or an impossible configuration."""


# ────────────────────────────────────────────────────────────────────────
#  1. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class Configuration:
    """Machine settings. Every triple is ordered right, middle, left."""

    order: tuple[int, int, int] = (0, 1, 2)     # 0-based rotor indices
    ring: tuple[int, int, int] = (0, 0, 0)      # ring offsets 0-25
    plugs: tuple[str, ...] = ()                 # e.g. ("AB", "CD")
    start: tuple[int, int, int] = (0, 0, 0)     # window positions 0-25
    stepping: StepMode = field(default=StepMode.REFERENCE)

    def validate(self) -> "Configuration":
        if len(self.order) != 3 or len(self.ring) != 3 or len(self.start) != 3:
            raise UsageError("order, ring and start each need three entries")
        for idx in self.order:
            if not 0 <= idx < len(ROTORS):
                raise UsageError(f"Rotor index {idx} outside 0–{len(ROTORS) - 1}")
        self.plugboard()
        return self

    def plugboard(self) -> Plugboard:
        try:
            return Plugboard(self.plugs)
        except ValueError as e:
            raise UsageError(str(e)) from e

    @property
    def window(self) -> str:
        return "".join(ALPHABET[p % SIZE] for p in self.start)

    def with_start(self, window: str) -> "Configuration":
        """Same machine, different starting letters (right to left)."""
        return replace(self, start=positions_from_letters(window))


DEFAULT_CONFIG = Configuration()


# ────────────────────────────────────────────────────────────────────────
#  2. Token helpers
# ────────────────────────────────────────────────────────────────────────


def positions_from_letters(text: str) -> tuple[int, int, int]:
    letters = [ch for ch in text if not ch.isspace()]
    if len(letters) != 3 or not all(Keyboard.is_letter(ch) for ch in letters):
        raise UsageError(f"Need three letters for the rotor windows, got {text!r}")
    a, b, c = (Keyboard.forward(ch) for ch in letters)
    return a, b, c


def parse_ring_token(token: str) -> int:
    """Ring setting as an offset 0-25.

    Letters ``A``-``Z`` map to ``0``-``25``; integers ``1``-``26`` map to
    ``0``-``25`` as well, so ``"A"`` and ``"1"`` are the same setting.
    """
    if Keyboard.is_letter(token):
        return Keyboard.forward(token)
    if token.isdecimal() and 1 <= int(token) <= SIZE:
        return int(token) - 1
    raise UsageError(f"Ring setting {token!r} is neither A–Z nor 1–{SIZE}")


def _ints(tokens: list[str], what: str) -> list[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise UsageError(f"Invalid keyfile: {what} must be integers, got {tokens}")


# ────────────────────────────────────────────────────────────────────────
#  3. Keyfile loading
# ────────────────────────────────────────────────────────────────────────


def parse_keyfile(text: str) -> Configuration:
    """Parse keyfile text into a validated :class:`Configuration`.

    Layout, one field per line: rotor order (1-5, right to left), ring
    settings, plug count, plug letters (only when the count is non-zero),
    start positions (right to left). Blank lines are ignored.
    """
    lines = [ln.split() for ln in text.splitlines() if ln.strip()]

    def line(n: int, what: str) -> list[str]:
        if n >= len(lines):
            raise UsageError(f"Invalid keyfile: missing {what} line")
        return lines[n]

    order_tokens = line(0, "rotor order")
    if len(order_tokens) != 3:
        raise UsageError("Invalid keyfile: rotor order needs three entries")
    order = [n - 1 for n in _ints(order_tokens, "rotor order")]
    for n in order:
        if not 0 <= n < len(ROTORS):
            raise UsageError(f"Invalid keyfile: rotor {n + 1} outside 1–{len(ROTORS)}")

    ring_tokens = line(1, "ring setting")
    if len(ring_tokens) != 3:
        raise UsageError("Invalid keyfile: ring settings need three entries")
    ring = [parse_ring_token(t) for t in ring_tokens]

    count_tokens = line(2, "plug count")
    (n_plugs,) = _ints(count_tokens[:1], "plug count")
    if not 0 <= n_plugs <= MAX_PAIRS:
        raise UsageError(f"Invalid keyfile: plug count {n_plugs} outside 0–{MAX_PAIRS}")

    cursor = 3
    plugs: tuple[str, ...] = ()
    if n_plugs:
        plug_tokens = line(cursor, "plug")
        n_letters = sum(Keyboard.is_letter(ch) for tok in plug_tokens for ch in tok)
        if n_letters != 2 * n_plugs:
            raise UsageError(
                f"Invalid keyfile: expected {2 * n_plugs} plug letters, got {n_letters}"
            )
        plugs = tuple(plug_tokens)
        cursor += 1

    # extra tokens after the third are ignored
    start = positions_from_letters("".join(line(cursor, "start position")[:3]))

    cfg = Configuration(
        order=(order[0], order[1], order[2]),
        ring=(ring[0], ring[1], ring[2]),
        plugs=plugs,
        start=start,
    )
    debug.log("keyfile", f"parsed {cfg}")
    return cfg.validate()


def load_keyfile(path: str | Path) -> Configuration:
    """Read and parse a keyfile; ``OSError`` propagates to the caller."""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise UsageError(f"Invalid keyfile: {path} is not UTF-8 text ({e.reason})") from e
    return parse_keyfile(text)


def dump_keyfile(cfg: Configuration) -> str:
    """Render *cfg* in keyfile form, ring settings and start as letters."""
    pairs = cfg.plugboard().pairs
    lines = [
        " ".join(str(n + 1) for n in cfg.order),
        " ".join(ALPHABET[r % SIZE] for r in cfg.ring),
        str(len(pairs)),
    ]
    if pairs:
        lines.append(" ".join(a + " " + b for a, b in pairs))
    lines.append(" ".join(cfg.window))
    return "\n".join(lines) + "\n"


__all__ = [
    "Configuration",
    "DEFAULT_CONFIG",
    "UsageError",
    "dump_keyfile",
    "load_keyfile",
    "parse_keyfile",
    "parse_ring_token",
    "positions_from_letters",
]
