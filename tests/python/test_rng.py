import math

from antcolony.rng import DeterministicRng


def test_reset_replays_the_same_stream():
    rng = DeterministicRng(7)
    first = [rng.next_angle(), rng.next_gauss(0.0, 1.0), rng.next_coinflip()]
    rng.reset()
    assert [rng.next_angle(), rng.next_gauss(0.0, 1.0), rng.next_coinflip()] == first
    assert rng.seed == 7


def test_draws_stay_in_range():
    rng = DeterministicRng(3)
    for _ in range(200):
        assert 0.0 <= rng.next_angle() <= 2.0 * math.pi
        assert -0.5 <= rng.next_range(-0.5, 0.5) <= 0.5
        assert rng.next_coinflip() in (True, False)
