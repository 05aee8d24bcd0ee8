"""Test byte constructors and random colors."""

import dataclasses

import numpy as np
import pytest as pt

from rgbhsl.color import HSL, RGB
from rgbhsl.factory import default_rng, new_hsl, new_rgb, random_hsl, random_rgb


def test_new_rgb():
    assert new_rgb(255, 0, 0) == RGB(1.0, 0.0, 0.0)
    assert new_rgb(51, 102, 153) == RGB(0.2, 0.4, 0.6)


def test_new_hsl_only_scales():
    """Bytes are scaled, not converted from RGB."""
    assert new_hsl(255, 0, 0) == HSL(1.0, 0.0, 0.0)
    assert new_hsl(0, 255, 51) == HSL(0.0, 1.0, 0.2)


def test_random_types():
    assert isinstance(random_rgb(), RGB)
    assert isinstance(random_hsl(), HSL)


def test_random_in_unit_interval():
    rng = np.random.default_rng(0)
    for _ in range(200):
        for value in dataclasses.astuple(random_rgb(rng)) + dataclasses.astuple(
            random_hsl(rng)
        ):
            assert 0.0 <= value < 1.0


def test_random_with_explicit_rng_is_reproducible():
    a = random_rgb(np.random.default_rng(42))
    b = random_rgb(np.random.default_rng(42))
    assert a == b
    assert dataclasses.astuple(random_hsl(np.random.default_rng(42))) == (
        dataclasses.astuple(a)
    )


def test_default_rng_seeded_from_environment(monkeypatch):
    monkeypatch.setenv("RGBHSL_SEED", "7")
    first = random_rgb()
    default_rng.cache_clear()
    second = random_rgb()
    assert first == second
    assert first == random_rgb(np.random.default_rng(7))


def test_default_rng_is_shared():
    assert default_rng() is default_rng()
