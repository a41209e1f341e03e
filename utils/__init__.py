# utils/__init__.py
"""
Utility modules for the Photoelectric Effect Laboratory Simulator.
"""

from .constants import (
    H_EV_S, PLANCK_CONSTANT_EV,
    C, C_LIGHT,
    Q, Q_ELECTRON,
    H_CODATA_J_S, H_CODATA_EV_S,
    HC_EV_NM,
    FREQUENCY_UNIT_HZ,
    eV_to_J, J_to_eV,
    wavelength_to_frequency, frequency_to_wavelength,
    photon_energy, nm_to_eV,
    wavelength_color,
)

__all__ = [
    'H_EV_S', 'PLANCK_CONSTANT_EV',
    'C', 'C_LIGHT',
    'Q', 'Q_ELECTRON',
    'H_CODATA_J_S', 'H_CODATA_EV_S',
    'HC_EV_NM',
    'FREQUENCY_UNIT_HZ',
    'eV_to_J', 'J_to_eV',
    'wavelength_to_frequency', 'frequency_to_wavelength',
    'photon_energy', 'nm_to_eV',
    'wavelength_color',
]
