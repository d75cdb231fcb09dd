import dataclasses

import pytest

from compiler import compile_machine, invert, rotate, to_displacement
from config import DEFAULT_CONFIG, Configuration, UsageError
from rotor_and_reflector import REFLECTOR, ROTORS

IDENTITY = list(range(26))


def test_invert_undoes_rotor():
    for rotor in ROTORS:
        table = rotor.table
        inverse = invert(table)
        assert [inverse[v] for v in table] == IDENTITY


def test_displacement_of_identity_is_zero():
    assert to_displacement(IDENTITY) == [0] * 26


def test_displacement_values():
    disp = to_displacement(ROTORS[0].table)
    # A -> E, U -> A
    assert disp[0] == 4
    assert disp[20] == 6


def test_rotate():
    assert rotate(IDENTITY, 0) == IDENTITY
    assert rotate(IDENTITY, 26) == IDENTITY
    shifted = rotate(IDENTITY, 1)
    assert shifted[0] == 25
    assert shifted[1] == 0


@pytest.mark.parametrize("pos", [0, 1, 13, 25])
def test_displacement_reproduces_wiring(pos):
    compiled = compile_machine(DEFAULT_CONFIG)
    for slot, idx in enumerate(DEFAULT_CONFIG.order):
        table = ROTORS[idx].table
        for c in range(26):
            i = (c + pos) % 26
            assert (c + compiled.forward[slot][i]) % 26 == (table[i] - pos) % 26


def test_backward_tables_invert_forward_tables():
    cfg = Configuration(order=(3, 4, 1), ring=(7, 0, 19))
    compiled = compile_machine(cfg)
    for slot in range(3):
        for pos in (0, 5, 21):
            for c in range(26):
                mid = (c + compiled.forward[slot][(c + pos) % 26]) % 26
                back = (mid + compiled.backward[slot][(mid + pos) % 26]) % 26
                assert back == c


def test_reflector_table_is_absolute():
    compiled = compile_machine(DEFAULT_CONFIG)
    assert list(compiled.reflector) == REFLECTOR.table
    assert compiled.reflector[0] == 24


def test_no_plugs_skips_plugboard():
    assert compile_machine(DEFAULT_CONFIG).plugboard is None


def test_plugboard_table():
    compiled = compile_machine(Configuration(plugs=("AB", "yz")))
    pb = compiled.plugboard
    assert pb[0] == 1 and pb[1] == 0
    assert pb[24] == 25 and pb[25] == 24
    assert all(pb[pb[x]] == x for x in range(26))


def test_notches_follow_rotor_order():
    assert compile_machine(DEFAULT_CONFIG).notches == (16, 4, 21)
    assert compile_machine(Configuration(order=(4, 3, 2))).notches == (25, 9, 21)


def test_repeated_rotor_is_allowed():
    compiled = compile_machine(Configuration(order=(0, 0, 0)))
    assert compiled.forward[0] == compiled.forward[1] == compiled.forward[2]


@pytest.mark.parametrize(
    "cfg",
    [
        Configuration(order=(0, 1, 5)),
        Configuration(order=(-1, 1, 2)),
        Configuration(plugs=("AB", "AC")),
    ],
)
def test_invalid_configuration_rejected(cfg):
    with pytest.raises(UsageError):
        compile_machine(cfg)


def test_compiled_machine_is_read_only():
    compiled = compile_machine(DEFAULT_CONFIG)
    with pytest.raises(dataclasses.FrozenInstanceError):
        compiled.plugboard = ()
