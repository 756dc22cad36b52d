import pytest

from dominion_sim.rngs import RandomStreams
from dominion_sim.rt import find_target, main


def _draws(seed, count):
    rng = RandomStreams()
    rng.select_stream(1)
    rng.put_seed(seed)
    return [int(rng.random() * 1000000000) for _ in range(count)]


def test_first_draw_is_found_immediately():
    first = _draws(7, 1)[0]
    assert find_target(7, first) == 1


def test_later_draw_is_found_no_later_than_its_position():
    values = _draws(11, 5)
    steps = find_target(11, values[4])
    assert 1 <= steps <= 5
    assert values[steps - 1] == values[4]


def test_search_is_deterministic():
    values = _draws(3, 3)
    target = values[2]
    first = find_target(3, target)
    second = find_target(3, target)
    assert 1 <= first <= 3
    assert values[first - 1] == target
    assert first == second


@pytest.mark.parametrize("target", [-1, 1000000000])
def test_unreachable_target_raises(target):
    with pytest.raises(ValueError):
        find_target(1, target)


def test_main_needs_two_arguments(capsys):
    assert main(["1"]) == 1
    assert capsys.readouterr().out == "Not enough inputs:  seed target\n"


def test_main_reports_found(capsys):
    target = _draws(5, 2)[1]
    assert main(["5", str(target)]) == 0
    assert capsys.readouterr().out == "Found the bug!\n"


def test_main_rejects_out_of_range_target(capsys):
    assert main(["5", "-3"]) == 1
    assert "Found the bug!" not in capsys.readouterr().out