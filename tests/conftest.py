from datetime import datetime
from typing import Callable, Iterator

import pygame
import pytest
from hypothesis import HealthCheck, settings

from railclock.config import ClockOptions
from railclock.state import ClockState

settings.register_profile(
    "default",
    suppress_health_check=[HealthCheck.function_scoped_fixture],
)
settings.load_profile("default")

MIDNIGHT = datetime(2024, 1, 1, 0, 0, 0)


@pytest.fixture(autouse=True, scope="session")
def configure_sdl_video_driver() -> Iterator[None]:
    """Force pygame to use the dummy SDL driver so headless tests remain stable."""

    patcher = pytest.MonkeyPatch()
    patcher.setenv("SDL_VIDEODRIVER", "dummy")
    patcher.setenv("SDL_AUDIODRIVER", "dummy")
    try:
        yield
    finally:
        patcher.undo()


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep RAILCLOCK_* overrides from the developer shell out of the tests."""

    for name in (
        "RAILCLOCK_CONFIG",
        "RAILCLOCK_SIZE",
        "RAILCLOCK_FPS",
        "RAILCLOCK_MARGIN",
        "RAILCLOCK_SHADOWS",
        "RAILCLOCK_FRAME_EXPORT_STRATEGY",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def init_pygame() -> Iterator[None]:
    pygame.init()
    yield
    pygame.quit()


@pytest.fixture
def default_options() -> ClockOptions:
    return ClockOptions()


@pytest.fixture
def midnight_state(default_options: ClockOptions) -> ClockState:
    return ClockState.at(MIDNIGHT, default_options.behavior)


@pytest.fixture
def fixed_now() -> Callable[..., Callable[[], datetime]]:
    """Build a ``now`` callable replaying the given datetimes in order."""

    def _factory(*moments: datetime) -> Callable[[], datetime]:
        remaining = list(moments)

        def _now() -> datetime:
            if len(remaining) > 1:
                return remaining.pop(0)
            return remaining[0]

        return _now

    return _factory
