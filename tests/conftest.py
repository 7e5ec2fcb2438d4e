"""
Pytest configuration for the OIOO test suite.

Logging configuration lives in context variables shared across tests, so
it is reset to defaults around every test.
"""

import random
import tempfile
from typing import Callable, Generator

import pytest

from oioo import OIOO, ContainerConfig, Env, Phase
from oioo.logging import LoggingConfig


@pytest.fixture(autouse=True)
def reset_logging_config() -> Generator[None, None, None]:
    config = LoggingConfig()
    config.update(log_level="info", log_output="stderr", disabled_loggers=[])
    yield
    config.update(log_level="info", log_output="stderr", disabled_loggers=[])


@pytest.fixture
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove OIOO_* variables and run from a directory without a .env file."""
    for envar_name in Env.types_map():
        monkeypatch.delenv(envar_name, raising=False)

    monkeypatch.chdir(tmp_path)


@pytest.fixture
def temp_log_directory() -> Generator[str, None, None]:
    with tempfile.TemporaryDirectory() as temp_directory:
        yield temp_directory


@pytest.fixture
def seeded_rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def container_factory(seeded_rng: random.Random) -> Callable[..., OIOO]:
    def create_container(
        occupancy: int = 4,
        padding: int = 6,
        rng: random.Random | None = None,
    ) -> OIOO:
        return OIOO(
            Phase.full(occupancy),
            config=ContainerConfig(padding=padding),
            rng=rng or seeded_rng,
        )

    return create_container
