"""Runtime settings shared by every frontend."""

from __future__ import annotations

import random
from dataclasses import dataclass
from pathlib import Path

DEFAULT_DELAY = 0.25  # seconds between playback steps


@dataclass(frozen=True)
class FrontendConfig:
    """Options collected by ``main.py`` and handed to a frontend's ``run``."""

    delay: float = DEFAULT_DELAY
    images_dir: Path | None = None
    image: Path | None = None
    seed: int | None = None

    def make_rng(self) -> random.Random | None:
        """A seeded shuffle source, or ``None`` for the process-wide default."""
        if self.seed is None:
            return None
        return random.Random(self.seed)
