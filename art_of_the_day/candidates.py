"""Random candidate selection."""

from __future__ import annotations

import random

# Upper bound on AIC artwork ids. This is a static guess at the catalog size;
# artworks added above it are never sampled until it is raised by hand.
DEFAULT_N_MAX = 250_000


def select_candidate(n_max: int = DEFAULT_N_MAX, rng: random.Random | None = None) -> int:
    """Pick a candidate id uniformly from [1, n_max]."""
    if n_max < 1:
        raise ValueError(f"n_max must be at least 1, got {n_max}")
    rng = rng or random
    return rng.randint(1, n_max)
