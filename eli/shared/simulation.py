"""Demo location simulation: bounded random walk on a 1200x800 floor plan."""

import random
from typing import Optional

# Walking speed in floor plan pixels per millisecond
SPEED_PX_PER_MS = 0.05

# Walk bounds keep entities off the floor plan edges
MIN_X, MAX_X = 50.0, 1150.0
MIN_Y, MAX_Y = 50.0, 750.0

# Fallback position for entities without a fix
DEFAULT_X, DEFAULT_Y = 500.0, 400.0


def _clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def simulate_entity_movement(
    x: Optional[float],
    y: Optional[float],
    delta_ms: float,
    rng: Optional[random.Random] = None,
) -> tuple[float, float]:
    """
    Advance one random-walk step.

    Each axis moves by up to speed * delta_ms in either direction, then the
    result is clamped to the walk bounds.
    """
    rng = rng or random
    x = DEFAULT_X if x is None else float(x)
    y = DEFAULT_Y if y is None else float(y)

    max_move = SPEED_PX_PER_MS * delta_ms
    new_x = x + (rng.random() - 0.5) * max_move * 2
    new_y = y + (rng.random() - 0.5) * max_move * 2

    return _clamp(new_x, MIN_X, MAX_X), _clamp(new_y, MIN_Y, MAX_Y)


def generate_random_position(rng: Optional[random.Random] = None) -> tuple[float, float]:
    """Random position with x in [100, 1100) and y in [100, 700)."""
    rng = rng or random
    return 100 + rng.random() * 1000, 100 + rng.random() * 600
