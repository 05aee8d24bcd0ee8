import pathlib as pl

import pytest as pt
import tomlkit as tk

from rgbhsl.factory import default_rng

ASSETS = pl.Path(__file__).parent / "assets"


def load_cases(name: str) -> list[dict]:
    """Load the ``cases`` array of tables from a TOML asset."""
    with (ASSETS / name).open("rt", encoding="utf-8") as fp:
        data = tk.load(fp)
    return [case.unwrap() for case in data["cases"]]


@pt.fixture(autouse=True)
def reset_default_rng():
    default_rng.cache_clear()
    yield
    default_rng.cache_clear()
