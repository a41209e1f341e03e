# materials/filters.py
"""
Laboratory filter set: the four mercury lines used for the h/e measurement.
"""

from dataclasses import dataclass
from typing import Dict, List

from .reference_data import FILTERS


@dataclass(frozen=True)
class StandardFilter:
    """One interference filter with its manual-tabulated line."""

    tag: str
    wavelength_nm: float
    frequency_Hz: float
    photon_energy_eV: float
    color: str = '#FFFFFF'

    @property
    def frequency_e14(self) -> float:
        """Frequency in units of 10¹⁴ Hz, as printed in the manual."""
        return self.frequency_Hz / 1e14


FILTER_DATABASE: Dict[str, StandardFilter] = {
    tag: StandardFilter(tag=tag, **props) for tag, props in FILTERS.items()
}


def get_filter(tag: str) -> StandardFilter:
    """
    Get standard filter by tag ('blue', 'green', 'yellow', 'orange').

    Raises:
        KeyError: If the tag is not a standard filter
    """
    key = tag.strip().lower()
    if key not in FILTER_DATABASE:
        raise KeyError(
            f"Filter '{tag}' not found. Available: {list_filters()}")
    return FILTER_DATABASE[key]


def list_filters() -> List[str]:
    """Return list of standard filter tags, shortest wavelength first."""
    return list(FILTER_DATABASE.keys())
