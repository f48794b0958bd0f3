"""Shared pytest fixtures."""
import numpy as np
import pytest

from gazool.machine import GameSession


@pytest.fixture
def session() -> GameSession:
    """Seeded session so tile placement is reproducible."""
    return GameSession.seeded(1234)


@pytest.fixture
def random_boards() -> list[np.ndarray]:
    """A batch of sparse-to-dense boards with plenty of merge candidates."""
    rng = np.random.default_rng(2048)
    values = np.array([0, 0, 0, 2, 2, 4, 4, 8, 16], dtype=np.int32)
    return [rng.choice(values, size=(4, 4)).astype(np.int32) for _ in range(200)]
