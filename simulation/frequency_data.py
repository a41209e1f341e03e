# simulation/frequency_data.py
"""
Frequency vs stopping-potential data collection.

One point per distinct wavelength: two wavelengths closer than the
tolerance (1 nm) are the same point, and the first measurement wins.
"""

from dataclasses import dataclass
from typing import Iterator, List, Tuple

# Wavelengths closer than this are the same data point (nm)
DEFAULT_WAVELENGTH_TOLERANCE_nm = 1.0


@dataclass(frozen=True)
class FrequencyDataPoint:
    """(ν, V_s) pair for the Millikan plot."""

    wavelength_nm: float
    frequency_Hz: float
    stopping_potential_V: float
    filter_tag: str

    @property
    def frequency_e14(self) -> float:
        """Frequency in units of 10¹⁴ Hz for display."""
        return self.frequency_Hz / 1e14


class FrequencyDataSet:
    """Insert-only collection of FrequencyDataPoints, bucketed by wavelength."""

    def __init__(self, tolerance_nm: float = DEFAULT_WAVELENGTH_TOLERANCE_nm):
        if tolerance_nm <= 0:
            raise ValueError(f"Wavelength tolerance must be > 0, got {tolerance_nm}")
        self.tolerance_nm = tolerance_nm
        self._points: List[FrequencyDataPoint] = []

    def find(self, wavelength_nm: float):
        """Existing point within tolerance of wavelength_nm, or None."""
        for p in self._points:
            if abs(p.wavelength_nm - wavelength_nm) < self.tolerance_nm:
                return p
        return None

    def record(self, wavelength_nm: float, frequency_Hz: float,
               stopping_potential_V: float, filter_tag: str) -> bool:
        """
        Insert a point unless its wavelength bucket is already taken.

        Returns:
            True if a new point was inserted, False if one already existed
        """
        if self.find(wavelength_nm) is not None:
            return False
        self._points.append(FrequencyDataPoint(
            wavelength_nm=wavelength_nm,
            frequency_Hz=frequency_Hz,
            stopping_potential_V=stopping_potential_V,
            filter_tag=filter_tag,
        ))
        return True

    def clear(self) -> None:
        self._points.clear()

    @property
    def points(self) -> Tuple[FrequencyDataPoint, ...]:
        return tuple(self._points)

    def xy(self) -> Tuple[List[float], List[float]]:
        """(frequencies Hz, stopping potentials V)"""
        return ([p.frequency_Hz for p in self._points],
                [p.stopping_potential_V for p in self._points])

    def __len__(self) -> int:
        return len(self._points)

    def __iter__(self) -> Iterator[FrequencyDataPoint]:
        return iter(self._points)

    def __repr__(self):
        return f"FrequencyDataSet({len(self)} points, tol={self.tolerance_nm} nm)"


def record_frequency_point(data: FrequencyDataSet, wavelength_nm: float,
                           frequency_Hz: float, stopping_potential_V: float,
                           filter_tag: str) -> bool:
    """Functional form of FrequencyDataSet.record."""
    return data.record(wavelength_nm, frequency_Hz, stopping_potential_V, filter_tag)
