# physics/light_source.py
"""
Light sources: either one of the standard filters or a custom wavelength.

The two are a tagged choice, never simultaneous state. Both resolve to a
LightSpectrum carrying wavelength, frequency and photon energy.

Usage:
    from physics.light_source import FilterLight, CustomLight

    light = FilterLight('blue').resolve()     # baked manual values
    light = CustomLight(400).resolve()        # computed from c and h
"""

from dataclasses import dataclass
from typing import Union

from materials.filters import get_filter
from utils.constants import wavelength_to_frequency, photon_energy

CUSTOM_TAG = 'custom'


@dataclass(frozen=True)
class LightSpectrum:
    """Resolved monochromatic light."""

    wavelength_nm: float
    frequency_Hz: float
    photon_energy_eV: float
    filter_tag: str


@dataclass(frozen=True)
class FilterLight:
    """Mercury line selected by a standard filter."""

    tag: str

    def __post_init__(self):
        get_filter(self.tag)  # KeyError for unknown tags

    def resolve(self) -> LightSpectrum:
        f = get_filter(self.tag)
        return LightSpectrum(
            wavelength_nm=f.wavelength_nm,
            frequency_Hz=f.frequency_Hz,
            photon_energy_eV=f.photon_energy_eV,
            filter_tag=f.tag,
        )


@dataclass(frozen=True)
class CustomLight:
    """Monochromator set to an arbitrary wavelength."""

    wavelength_nm: float

    def __post_init__(self):
        if not self.wavelength_nm > 0:
            raise ValueError(
                f"Wavelength must be > 0 nm, got {self.wavelength_nm}")

    @property
    def tag(self) -> str:
        return CUSTOM_TAG

    def resolve(self) -> LightSpectrum:
        # f = c / λ ; E = h·f with h in eV·s, so E comes out in eV
        frequency = wavelength_to_frequency(self.wavelength_nm)
        return LightSpectrum(
            wavelength_nm=self.wavelength_nm,
            frequency_Hz=frequency,
            photon_energy_eV=photon_energy(frequency),
            filter_tag=CUSTOM_TAG,
        )


LightSource = Union[FilterLight, CustomLight]


def make_light_source(filter_tag: str = None,
                      wavelength_nm: float = None) -> LightSource:
    """
    Build a light source from CLI-style arguments.

    Exactly one of filter_tag / wavelength_nm must be given;
    filter_tag='custom' requires wavelength_nm.
    """
    if filter_tag is not None and filter_tag != CUSTOM_TAG:
        if wavelength_nm is not None:
            raise ValueError("Give either a filter or a custom wavelength, not both")
        return FilterLight(filter_tag)
    if wavelength_nm is None:
        raise ValueError("Custom light requires a wavelength")
    return CustomLight(wavelength_nm)
