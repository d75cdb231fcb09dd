# machine.py  ─────────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from compiler import CompiledMachine, compile_machine
from config import Configuration
from debug import Debug
from keyboard_and_plugboard import Keyboard
from rotor_and_reflector import SIZE
from stepping import Stepper

debug = Debug()


def encipher_signal(compiled: CompiledMachine, pos: Sequence[int], c: int) -> int:
    """One pass through the stack with the rotors held at *pos*.

    For a fixed *pos* this is an involution on 0-25 without fixed points.
    """
    plugs = compiled.plugboard
    if plugs is not None:
        c = plugs[c]

    # right → left
    for slot in range(3):
        idx = (c + pos[slot]) % SIZE
        c = (c + compiled.forward[slot][idx]) % SIZE

    c = compiled.reflector[c]

    # left → right, same positions
    for slot in (2, 1, 0):
        idx = (c + pos[slot]) % SIZE
        c = (c + compiled.backward[slot][idx]) % SIZE

    if plugs is not None:
        c = plugs[c]
    return c


class Machine:
    """A compiled wiring plus the one set of rotors that moves over it."""

    def __init__(self, compiled: CompiledMachine) -> None:
        self.compiled = compiled
        cfg = compiled.config
        self.stepper = Stepper(compiled.notches, cfg.start, cfg.stepping)

    @classmethod
    def from_config(cls, config: Configuration) -> "Machine":
        return cls(compile_machine(config))

    # ––– helpers ––––––––––––––––––––––––––––––––––––––––––––––––

    def reset(self) -> None:
        """Rewind to the configured start positions."""
        self.stepper.reset()

    @property
    def window(self) -> str:
        return self.stepper.window

    # ── encipher one symbol  ────────────────────────────────────

    def encipher(self, ch: str) -> str:
        if not Keyboard.is_letter(ch):
            return ch

        pos = self.stepper.advance()
        signal = encipher_signal(self.compiled, pos, Keyboard.forward(ch))
        out_ch = Keyboard.backward(signal)
        if debug.active("encipher"):
            debug.log("encipher", f"{ch}->{out_ch} at {self.window}")
        return out_ch

    def encipher_text(self, text: str) -> str:
        return "".join(self.encipher(ch) for ch in text)

    def encipher_bytes(self, data: bytes) -> bytes:
        """Every byte passes through; only ASCII letters are transformed."""
        return bytes(ord(self.encipher(chr(b))) if b < 128 else b for b in data)

    def __repr__(self) -> str:
        return f"<Machine {self.window} {self.compiled.config.order}>"
