import pytest

from keyboard_and_plugboard import Keyboard, Plugboard


# ── Keyboard ──────────────────────────────────────────────────────
def test_keyboard_round_trip_and_case():
    assert Keyboard.forward("a") == 0
    assert Keyboard.forward("Z") == 25
    assert Keyboard.backward(Keyboard.forward("q")) == "Q"


@pytest.mark.parametrize("ch", ["1", " ", "é", "AB", ""])
def test_keyboard_rejects_non_letters(ch):
    assert not Keyboard.is_letter(ch)
    with pytest.raises(ValueError):
        Keyboard.forward(ch)


@pytest.mark.parametrize("signal", [-1, 26])
def test_keyboard_rejects_out_of_range_signal(signal):
    with pytest.raises(ValueError):
        Keyboard.backward(signal)


# ── Plugboard ─────────────────────────────────────────────────────
def test_single_pair_swaps_both_ways():
    pb = Plugboard(["AB"])
    assert pb.forward(0) == 1
    assert pb.forward(1) == 0
    assert pb.forward(2) == 2


def test_plugboard_is_self_inverse():
    pb = Plugboard(["AB", "CX", "QZ", "MN"])
    for x in range(26):
        assert pb.backward(pb.forward(x)) == x


def test_no_plugs_is_inactive():
    pb = Plugboard([])
    assert not pb.active
    assert pb.table is None
    assert len(pb) == 0
    assert [pb.forward(x) for x in range(26)] == list(range(26))


def test_pairs_are_case_insensitive_and_skip_non_letters():
    pb = Plugboard(["a-b", "C D", ("e", "f")])
    assert pb.pairs == [("A", "B"), ("C", "D"), ("E", "F")]
    assert repr(pb) == "<Plugboard AB CD EF>"


def test_run_of_letters_pairs_consecutively():
    assert Plugboard(["A", "B", "C", "D"]).pairs == [("A", "B"), ("C", "D")]


@pytest.mark.parametrize(
    "pairs",
    [
        ["AA"],             # self-pair
        ["AB", "BC"],       # letter used twice
        ["AB", "C"],        # dangling letter
        ["AB"] * 14,        # more than 13 pairs
    ],
)
def test_invalid_plugs_rejected(pairs):
    with pytest.raises(ValueError):
        Plugboard(pairs)
