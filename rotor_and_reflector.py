# rotor_and_reflector.py
from __future__ import annotations

import string
from dataclasses import dataclass

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)


# ── Rotor wiring ──────────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class RotorDefinition:
    """One physical wheel: its wiring and the window letter of its notch."""

    name: str
    wiring: str
    notch: str

    def __post_init__(self) -> None:
        if sorted(self.wiring) != sorted(ALPHABET):
            raise ValueError(f"Rotor {self.name}: wiring must be a permutation of the alphabet")
        if len(self.notch) != 1 or self.notch not in ALPHABET:
            raise ValueError(f"Rotor {self.name}: notch must be a single letter")

    @property
    def table(self) -> list[int]:
        """Absolute forward substitution, signal -> signal."""
        return [ALPHABET.index(c) for c in self.wiring]

    @property
    def notch_position(self) -> int:
        return ALPHABET.index(self.notch)

    def __repr__(self) -> str:
        return f"<Rotor {self.name} notch={self.notch}>"


# ── Reflector wiring ──────────────────────────────────────────────
@dataclass(frozen=True, slots=True)
class ReflectorDefinition:
    name: str
    wiring: str

    def __post_init__(self) -> None:
        if len(self.wiring) != SIZE:
            raise ValueError("Reflector wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(self.wiring):
            j = ALPHABET.index(c)
            if self.wiring[j] != ALPHABET[i] or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")

    @property
    def table(self) -> list[int]:
        return [ALPHABET.index(c) for c in self.wiring]

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"


# ── Wheel database ────────────────────────────────────────────────
# Index 0-4 is the rotor's identity; keyfiles count from 1.
ROTORS: tuple[RotorDefinition, ...] = (
    RotorDefinition("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", notch="Q"),
    RotorDefinition("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", notch="E"),
    RotorDefinition("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", notch="V"),
    RotorDefinition("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", notch="J"),
    RotorDefinition("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", notch="Z"),
)

REFLECTOR = ReflectorDefinition("B", "YRUHQSLDPXNGOKMIEBFZCWVJAT")

__all__ = [
    "ALPHABET",
    "SIZE",
    "RotorDefinition",
    "ReflectorDefinition",
    "ROTORS",
    "REFLECTOR",
]
