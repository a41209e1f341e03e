# =============================================================================
# physics/photoelectric.py — Photoelectric Effect Physics
# =============================================================================
# Maps (material, light, applied voltage) to the quantities of Einstein's
# photoelectric equation and to the photocell current.
#
#     E = h·f = φ + KE_max            KE_max = max(0, E − φ)
#     e·V_s = KE_max                  V_s [V] = KE_max [eV]
#     f_0 = φ / h                     λ_0 = c / f_0
#
# Current model (simplified vacuum photocell I-V curve):
#     V ≥ 0        : I = I_sat                    (all electrons collected)
#     −V_s < V < 0 : I = I_sat · (V + V_s) / V_s  (linear retarding ramp)
#     V ≤ −V_s     : I = 0
#
# The linear ramp stands in for the finite energy spread of real
# photoelectrons; an ideal cell would cut off sharply at −V_s.
#
# References:
#   - A. Einstein, Ann. Phys. 17, 132 (1905)
#   - R.A. Millikan, Phys. Rev. 7, 355 (1916)
# =============================================================================

import numpy as np
from dataclasses import dataclass
from typing import Optional

from materials.photocathodes import PhotocathodeMaterial
from utils.constants import H_EV_S, C
from .light_source import LightSource
from .physics_noise import jitter_factor


# Simulation constant, not derived from the light intensity
DEFAULT_SATURATION_CURRENT_uA = 15.0

# Full relative width of the reading jitter (±0.05 %)
DEFAULT_CURRENT_JITTER = 0.001


@dataclass(frozen=True)
class PhysicsResult:
    """Instantaneous state of the photocell."""

    wavelength_nm: float
    frequency_Hz: float
    photon_energy_eV: float
    work_function_eV: float
    max_kinetic_energy_eV: float
    stopping_potential_V: float
    threshold_frequency_Hz: float
    threshold_wavelength_nm: float
    current_uA: float
    is_emission: bool
    saturation_current_uA: float
    voltage_V: float
    material: str
    filter_tag: str


# =============================================================================
# EINSTEIN EQUATION
# =============================================================================

def max_kinetic_energy(photon_energy_eV: float, work_function_eV: float) -> float:
    """KE_max = max(0, E − φ)  [eV]"""
    return max(0.0, photon_energy_eV - work_function_eV)


def threshold_frequency(work_function_eV: float) -> float:
    """f_0 = φ / h  [Hz]"""
    return work_function_eV / H_EV_S


def threshold_wavelength(work_function_eV: float) -> float:
    """λ_0 = c / f_0  [nm]; infinite for φ = 0."""
    f0 = threshold_frequency(work_function_eV)
    if f0 == 0:
        return float('inf')
    return C * 1e9 / f0


# =============================================================================
# CURRENT MODEL
# =============================================================================

def photocurrent(voltage_V: float, stopping_potential_V: float,
                 is_emission: bool,
                 saturation_current_uA: float = DEFAULT_SATURATION_CURRENT_uA) -> float:
    """
    Noise-free photocell current at an applied voltage.

    Args:
        voltage_V: Anode voltage relative to the cathode (V)
        stopping_potential_V: V_s of the current light/material pair (V)
        is_emission: Whether photons eject electrons at all
        saturation_current_uA: Plateau current (µA)

    Returns:
        Current in µA
    """
    if not is_emission:
        return 0.0
    if voltage_V >= 0:
        return saturation_current_uA
    if stopping_potential_V <= 0:
        # Zero-width ramp: step at V = 0
        return 0.0
    factor = (voltage_V + stopping_potential_V) / stopping_potential_V
    return saturation_current_uA * max(0.0, factor)


def iv_curve(voltages_V: np.ndarray, stopping_potential_V: float,
             is_emission: bool,
             saturation_current_uA: float = DEFAULT_SATURATION_CURRENT_uA) -> np.ndarray:
    """Noise-free I-V characteristic (µA) over an array of voltages."""
    return np.array([
        photocurrent(v, stopping_potential_V, is_emission, saturation_current_uA)
        for v in voltages_V
    ])


# =============================================================================
# FULL STATE
# =============================================================================

def compute_physics(material: PhotocathodeMaterial,
                    light_source: LightSource,
                    voltage_V: float,
                    saturation_current_uA: float = DEFAULT_SATURATION_CURRENT_uA,
                    current_jitter: float = DEFAULT_CURRENT_JITTER,
                    rng: Optional[np.random.Generator] = None) -> PhysicsResult:
    """
    Evaluate the photoelectric effect for the current experiment parameters.

    Deterministic except for the multiplicative reading jitter, which is
    drawn from ``rng`` (pass current_jitter=0 to switch it off).

    Args:
        material: Photocathode
        light_source: FilterLight or CustomLight
        voltage_V: Applied voltage (V)
        saturation_current_uA: Plateau current (µA)
        current_jitter: Full relative width of the reading jitter
        rng: Random source for the jitter

    Returns:
        PhysicsResult
    """
    light = light_source.resolve()
    phi = material.work_function_eV
    energy = light.photon_energy_eV

    ke_max = max_kinetic_energy(energy, phi)
    v_stop = ke_max
    is_emission = energy > phi

    current = photocurrent(voltage_V, v_stop, is_emission, saturation_current_uA)
    if current != 0.0:
        current *= jitter_factor(current_jitter, rng)

    return PhysicsResult(
        wavelength_nm=light.wavelength_nm,
        frequency_Hz=light.frequency_Hz,
        photon_energy_eV=energy,
        work_function_eV=phi,
        max_kinetic_energy_eV=ke_max,
        stopping_potential_V=v_stop,
        threshold_frequency_Hz=threshold_frequency(phi),
        threshold_wavelength_nm=threshold_wavelength(phi),
        current_uA=current,
        is_emission=is_emission,
        saturation_current_uA=saturation_current_uA if is_emission else 0.0,
        voltage_V=voltage_V,
        material=material.name,
        filter_tag=light.filter_tag,
    )
