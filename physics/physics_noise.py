# =============================================================================
# physics/physics_noise.py — Instrument Noise Model
# =============================================================================
# The picoammeter of the teaching apparatus is modelled with a single
# noise source: uniform multiplicative jitter
#
#     I_meas = I · (1 + (U(0,1) − 0.5) · w)
#
# where w is the full relative width (w = 0.001 → ±0.05 %).
#
# Every random draw in the simulator goes through a numpy Generator that
# the caller may inject; pass a seeded generator (or w = 0) for
# reproducible results.
# =============================================================================

import numpy as np
from typing import Optional


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """
    Create the simulator's random source.

    Args:
        seed: Integer seed, or None for fresh OS entropy

    Returns:
        numpy Generator (PCG64)
    """
    return np.random.default_rng(seed)


def _resolve_rng(rng: Optional[np.random.Generator]) -> np.random.Generator:
    return rng if rng is not None else np.random.default_rng()


def jitter_factor(relative_width: float,
                  rng: Optional[np.random.Generator] = None) -> float:
    """
    One multiplicative jitter factor 1 + (U − 0.5)·w.

    Args:
        relative_width: Full relative width w (0 disables the jitter)
        rng: Random source (a fresh unseeded one if None)

    Returns:
        Factor in [1 − w/2, 1 + w/2)
    """
    if relative_width < 0:
        raise ValueError(f"Jitter width must be >= 0, got {relative_width}")
    if relative_width == 0:
        return 1.0
    u = _resolve_rng(rng).random()
    return 1.0 + (u - 0.5) * relative_width


def jittered_samples(value: float, n_samples: int, relative_width: float,
                     rng: Optional[np.random.Generator] = None) -> np.ndarray:
    """
    Draw independent noisy readings around a true value.

    sample_i = value + (U_i − 0.5) · w · value

    Args:
        value: True signal (any unit)
        n_samples: Number of readings
        relative_width: Full relative width w
        rng: Random source

    Returns:
        Array of shape (n_samples,)
    """
    if relative_width < 0:
        raise ValueError(f"Jitter width must be >= 0, got {relative_width}")
    u = _resolve_rng(rng).random(n_samples)
    return value + (u - 0.5) * relative_width * value


def uniform_noise_std(value: float, relative_width: float) -> float:
    """
    Theoretical standard deviation of the jitter.

    σ = |value| · w / √12   (variance of U(−w/2, w/2) is w²/12)
    """
    return abs(value) * relative_width / np.sqrt(12.0)
