# physics/__init__.py
"""
Physics engine for the Photoelectric Effect Laboratory Simulator.

    photoelectric  - Einstein equation, threshold quantities, I-V model
    light_source   - Filter / custom-wavelength light, tagged choice
    physics_noise  - Injectable random source and reading jitter
"""

from .photoelectric import (
    PhysicsResult,
    compute_physics,
    photocurrent,
    iv_curve,
    max_kinetic_energy,
    threshold_frequency,
    threshold_wavelength,
    DEFAULT_SATURATION_CURRENT_uA,
    DEFAULT_CURRENT_JITTER,
)
from .light_source import (
    LightSpectrum,
    FilterLight,
    CustomLight,
    make_light_source,
    CUSTOM_TAG,
)
from .physics_noise import make_rng, jitter_factor, jittered_samples

__all__ = [
    'PhysicsResult',
    'compute_physics',
    'photocurrent',
    'iv_curve',
    'max_kinetic_energy',
    'threshold_frequency',
    'threshold_wavelength',
    'DEFAULT_SATURATION_CURRENT_uA',
    'DEFAULT_CURRENT_JITTER',
    'LightSpectrum',
    'FilterLight',
    'CustomLight',
    'make_light_source',
    'CUSTOM_TAG',
    'make_rng',
    'jitter_factor',
    'jittered_samples',
]
