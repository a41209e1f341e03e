# simulation/measurement.py
"""
Precision Measurement Sampler

Simulates the averaging a high-precision picoammeter performs: a burst of
N readings is taken at the current photocell state and reduced to
mean / standard deviation / standard error.

    x_i   = I + (U_i − 0.5)·w·I            (independent per reading)
    mean  = Σx_i / N
    var   = Σ(x_i − mean)² / N             (population variance)
    SE    = √var / √N

With w = 0.001 and N = 1000 the standard error is far below 0.001 % of
the signal.

Usage:
    from simulation.measurement import take_measurement

    record = take_measurement(physics, sample_count=1000, rng=rng)
    print(record.current_uA, record.standard_error_uA)
"""

import numpy as np
from dataclasses import dataclass
from datetime import datetime
from typing import Dict, Optional

from physics.photoelectric import PhysicsResult
from physics.physics_noise import jittered_samples

# Readings per "take measurement"
DEFAULT_SAMPLE_COUNT = 1000

# Full relative width of the per-reading jitter (±0.05 %)
DEFAULT_SAMPLE_JITTER = 0.001


@dataclass(frozen=True)
class MeasurementRecord:
    """One averaged measurement; never mutated after creation."""

    voltage_V: float
    current_uA: float
    standard_error_uA: float
    standard_deviation_uA: float
    sample_count: int
    material: str
    work_function_eV: float
    wavelength_nm: float
    frequency_Hz: float
    photon_energy_eV: float
    stopping_potential_V: float
    filter_tag: str
    timestamp: datetime

    @property
    def relative_error(self) -> float:
        """SE / mean, or 0 for a dark reading."""
        if self.current_uA == 0:
            return 0.0
        return self.standard_error_uA / abs(self.current_uA)


def sample_statistics(samples) -> Dict[str, float]:
    """
    Reduce raw readings to summary statistics.

    Args:
        samples: 1-D array of readings (at least one)

    Returns:
        Dict with 'mean', 'variance', 'std', 'standard_error', 'n'
    """
    x = np.asarray(samples, dtype=float)
    n = x.size
    if n == 0:
        raise ValueError("Cannot summarise an empty sample")

    mean = x.mean()
    variance = np.mean((x - mean) ** 2)
    std = np.sqrt(variance)

    return {
        'mean': float(mean),
        'variance': float(variance),
        'std': float(std),
        'standard_error': float(std / np.sqrt(n)),
        'n': n,
    }


def take_measurement(physics: PhysicsResult,
                     sample_count: int = DEFAULT_SAMPLE_COUNT,
                     sample_jitter: float = DEFAULT_SAMPLE_JITTER,
                     rng: Optional[np.random.Generator] = None,
                     timestamp: Optional[datetime] = None) -> MeasurementRecord:
    """
    Simulate one averaged high-precision current measurement.

    The per-reading jitter is layered on top of the single jitter already
    contained in physics.current_uA.

    Args:
        physics: Photocell state to measure
        sample_count: Number of readings N (> 0)
        sample_jitter: Full relative width of the per-reading jitter
        rng: Random source
        timestamp: Record time (now if None)

    Returns:
        MeasurementRecord

    Raises:
        ValueError: If sample_count is not a positive integer
    """
    if isinstance(sample_count, bool) or not isinstance(sample_count, (int, np.integer)):
        raise ValueError(f"Sample count must be an integer, got {sample_count!r}")
    if sample_count <= 0:
        raise ValueError(f"Sample count must be > 0, got {sample_count}")

    samples = jittered_samples(physics.current_uA, sample_count, sample_jitter, rng)
    stats = sample_statistics(samples)

    return MeasurementRecord(
        voltage_V=physics.voltage_V,
        current_uA=stats['mean'],
        standard_error_uA=stats['standard_error'],
        standard_deviation_uA=stats['std'],
        sample_count=int(sample_count),
        material=physics.material,
        work_function_eV=physics.work_function_eV,
        wavelength_nm=physics.wavelength_nm,
        frequency_Hz=physics.frequency_Hz,
        photon_energy_eV=physics.photon_energy_eV,
        stopping_potential_V=physics.stopping_potential_V,
        filter_tag=physics.filter_tag,
        timestamp=timestamp or datetime.now(),
    )
