# keyboard_and_plugboard.py
from __future__ import annotations

from collections.abc import Sequence
from debug import Debug
from rotor_and_reflector import ALPHABET, SIZE

debug = Debug()

MAX_PAIRS = SIZE // 2


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Converts between display characters and integer signals 0-25."""

    @staticmethod
    def is_letter(ch: str) -> bool:
        return len(ch) == 1 and ch.isascii() and ch.isalpha()

    # letter → integer signal
    @staticmethod
    def forward(letter: str) -> int:
        if not Keyboard.is_letter(letter):
            raise ValueError(f"Invalid character {letter!r} for the A-Z keyboard.")
        return ALPHABET.index(letter.upper())

    # integer signal → letter
    @staticmethod
    def backward(signal: int) -> str:
        if not (0 <= signal < SIZE):
            raise ValueError(f"Signal {signal} out of range 0–{SIZE - 1}")
        return ALPHABET[signal]


# ── Plugboard ─────────────────────────────────────────────────────
class Plugboard:
    """Letter-pair swaps applied before and after the rotor stack.

    Pairs may be given as ``"AB"`` strings, ``("A", "B")`` tuples, or one run of
    letters. Letters are compared case-insensitively and anything that is not
    a letter is skipped, so ``["a-b", "C D"]`` wires A↔B and C↔D.
    """

    def __init__(self, pairs: Sequence[str | tuple[str, str]] = ()) -> None:
        letters = [
            ch.upper()
            for raw in pairs
            for ch in (raw if isinstance(raw, str) else "".join(raw))
            if Keyboard.is_letter(ch)
        ]
        if len(letters) % 2:
            raise ValueError(f"Plug letter {letters[-1]!r} has no partner")
        if len(letters) // 2 > MAX_PAIRS:
            raise ValueError(f"Too many plug pairs (max {MAX_PAIRS})")

        self.pairs: list[tuple[str, str]] = []
        table = list(range(SIZE))
        used: set[str] = set()

        for a, b in zip(letters[::2], letters[1::2]):
            if a == b:
                raise ValueError(f"Plugboard cannot map a symbol to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ValueError(f"Character {dup!r} already used in plugboard")

            # passed validation → commit swap
            u, v = Keyboard.forward(a), Keyboard.forward(b)
            table[u], table[v] = v, u
            used.update((a, b))
            self.pairs.append((a, b))

        # no plugs: the stage is skipped, not run as an identity
        self.table: list[int] | None = table if self.pairs else None
        debug.log("plugboard", f"wired {self!r}")

    @property
    def active(self) -> bool:
        return self.table is not None

    # one private helper does the job for both directions
    def _map(self, signal: int) -> int:
        if self.table is None:
            return signal
        return self.table[signal]

    forward = _map        # alias: signal in
    backward = _map       # alias: signal out

    def __len__(self) -> int:
        return len(self.pairs)

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
