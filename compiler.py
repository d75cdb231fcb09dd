# compiler.py
"""Turn a :class:`~config.Configuration` into lookup tables.

A rotor at position ``p`` maps signal ``c`` to ``c + disp[(c + p) % 26]``.
Storing each wheel as a *displacement* table means rotation costs one
index shift and one modular add instead of a fresh permutation per position.
"""
from __future__ import annotations

from dataclasses import dataclass

from config import Configuration
from debug import Debug
from rotor_and_reflector import REFLECTOR, ROTORS, SIZE

debug = Debug()

Table = tuple[int, ...]


def invert(table: list[int]) -> list[int]:
    """Inverse permutation: the path taken on the way back through a wheel."""
    inverse = [0] * SIZE
    for j, v in enumerate(table):
        inverse[v] = j
    return inverse


def to_displacement(table: list[int]) -> list[int]:
    return [(SIZE + v - j) % SIZE for j, v in enumerate(table)]


def rotate(table: list[int], ring: int) -> list[int]:
    """Shift the wiring *ring* places against the alphabet ring."""
    ring %= SIZE
    if ring == 0:
        return list(table)
    return [table[(j - ring + SIZE) % SIZE] for j in range(SIZE)]


@dataclass(frozen=True, slots=True)
class CompiledMachine:
    """Read-only tables for one configuration, shareable between machines.

    ``forward`` and ``backward`` are indexed right, middle, left.
    """

    config: Configuration
    forward: tuple[Table, Table, Table]
    backward: tuple[Table, Table, Table]
    reflector: Table
    plugboard: Table | None
    notches: tuple[int, int, int]


def compile_machine(config: Configuration) -> CompiledMachine:
    config.validate()

    reflector = tuple(REFLECTOR.table)

    forward: list[Table] = []
    backward: list[Table] = []
    for slot, (idx, ring) in enumerate(zip(config.order, config.ring)):
        absolute = ROTORS[idx].table
        # ring rotation goes after the displacement conversion; rotating the
        # absolute table instead breaks reciprocity for any non-zero ring
        fwd = rotate(to_displacement(absolute), ring)
        bwd = rotate(to_displacement(invert(absolute)), ring)
        forward.append(tuple(fwd))
        backward.append(tuple(bwd))
        debug.log("compiler", f"slot {slot}: {ROTORS[idx]!r} ring={ring % SIZE}")

    pb = config.plugboard()
    plugboard = tuple(pb.table) if pb.table is not None else None

    notches = tuple(ROTORS[idx].notch_position for idx in config.order)

    compiled = CompiledMachine(
        config=config,
        forward=(forward[0], forward[1], forward[2]),
        backward=(backward[0], backward[1], backward[2]),
        reflector=reflector,
        plugboard=plugboard,
        notches=(notches[0], notches[1], notches[2]),
    )
    debug.log("compiler", f"plugboard {pb!r}, notches {compiled.notches}")
    return compiled
