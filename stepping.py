# stepping.py
from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from debug import Debug
from rotor_and_reflector import ALPHABET, SIZE

debug = Debug()


class StepMode(str, Enum):
    # middle rotor gets an extra bump on every key-press
    REFERENCE = "reference"
    # textbook double-step anomaly
    HISTORICAL = "historical"


class Stepper:
    """Live positions of the right, middle and left rotor.

    ``notches`` holds the turnover positions of the right and middle rotor;
    the left rotor only ever moves through the double-step carry.
    """

    def __init__(
        self,
        notches: Sequence[int],
        start: Sequence[int] = (0, 0, 0),
        mode: StepMode = StepMode.REFERENCE,
    ) -> None:
        if len(start) != 3:
            raise ValueError("start needs exactly three positions")

        self.step: tuple[int, int] = (notches[0] % SIZE, notches[1] % SIZE)
        self.start: tuple[int, int, int] = tuple(p % SIZE for p in start)
        self.mode = StepMode(mode)
        self.reset()

    def reset(self) -> None:
        """Rotate back to the start positions and forget any pending carry."""
        self.pos: list[int] = list(self.start)
        self.double_step_pending: bool = False

    # ── stepping logic  ─────────────────────────────────────────

    def advance(self) -> tuple[int, int, int]:
        """Advance rotors one key-press; return the new positions."""
        pos = self.pos

        pos[0] = (pos[0] + 1) % SIZE

        if pos[0] == self.step[0]:
            pos[1] = (pos[1] + 1) % SIZE

        if self.mode is StepMode.REFERENCE:
            pos[1] = (pos[1] + 1) % SIZE

        if self.double_step_pending:
            pos[1] = (pos[1] + 1) % SIZE
            pos[2] = (pos[2] + 1) % SIZE
            self.double_step_pending = False

        if pos[1] == self.step[1]:
            self.double_step_pending = True

        debug.log("stepping", f"pos {pos} pending={self.double_step_pending}")
        return self.positions

    @property
    def positions(self) -> tuple[int, int, int]:
        return (self.pos[0], self.pos[1], self.pos[2])

    @property
    def window(self) -> str:
        """Positions as the letters shown in the windows, right to left."""
        return "".join(ALPHABET[p] for p in self.pos)

    def __repr__(self) -> str:
        return f"<Stepper {self.window} mode={self.mode.value} pending={self.double_step_pending}>"
