import pytest

from stepping import StepMode, Stepper

# rotor I turns over at Q, rotor II at E
NOTCHES = (16, 4, 21)


def run(stepper: Stepper, n: int) -> tuple[int, int, int]:
    for _ in range(n):
        stepper.advance()
    return stepper.positions


def test_reference_seventeen_steps_from_aaa():
    s = Stepper(NOTCHES)
    # middle bumps every key-press, once more at Q, once more on the double step
    assert run(s, 17) == (17, 19, 1)


def test_historical_seventeen_steps_moves_middle_once():
    s = Stepper(NOTCHES, mode=StepMode.HISTORICAL)
    assert run(s, 17) == (17, 1, 0)


def test_historical_double_step_window():
    # windows P D A -> Q E A -> R F B
    s = Stepper(NOTCHES, start=(15, 3, 0), mode=StepMode.HISTORICAL)

    assert s.advance() == (16, 4, 0)
    assert s.double_step_pending

    assert s.advance() == (17, 5, 1)
    assert not s.double_step_pending

    assert s.advance() == (18, 5, 1)


def test_reference_double_step_from_aaa():
    s = Stepper(NOTCHES)
    assert run(s, 3) == (3, 3, 0)
    assert not s.double_step_pending

    assert s.advance() == (4, 4, 0)
    assert s.double_step_pending

    assert s.advance() == (5, 6, 1)
    assert not s.double_step_pending


@pytest.mark.parametrize("mode", list(StepMode))
def test_right_rotor_cycles_in_26(mode):
    s = Stepper(NOTCHES, start=(7, 9, 11), mode=mode)
    assert run(s, 26)[0] == 7


def test_positions_wrap_modulo_26():
    s = Stepper(NOTCHES, start=(25, 25, 25))
    assert s.advance() == (0, 0, 25)


def test_reset_restores_start_and_clears_flag():
    s = Stepper(NOTCHES, start=(1, 2, 3))
    run(s, 2)
    assert s.double_step_pending
    s.reset()
    assert s.positions == (1, 2, 3)
    assert not s.double_step_pending


def test_window_letters():
    s = Stepper(NOTCHES, start=(0, 4, 25))
    assert s.window == "AEZ"


def test_start_needs_three_positions():
    with pytest.raises(ValueError):
        Stepper(NOTCHES, start=(0, 0))


def test_mode_accepts_plain_string():
    assert Stepper(NOTCHES, mode="historical").mode is StepMode.HISTORICAL
