from unittest.mock import patch

from headsup.delay import random_delay


def test_default_range():
    with patch("headsup.delay.time.sleep") as sleep:
        for _ in range(20):
            delay = random_delay()
            assert 500 <= delay <= 3000
            sleep.assert_called_with(delay / 1000)


def test_custom_range():
    with patch("headsup.delay.time.sleep"):
        for _ in range(20):
            assert 10 <= random_delay(10, 20) <= 20


def test_swapped_bounds():
    with patch("headsup.delay.time.sleep"):
        for _ in range(20):
            assert 10 <= random_delay(20, 10) <= 20


def test_equal_bounds_sleeps_exactly():
    with patch("headsup.delay.time.sleep") as sleep:
        assert random_delay(7, 7) == 7
        sleep.assert_called_once_with(7 / 1000)