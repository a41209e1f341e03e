# lab/session.py
"""
Experiment session: the explicitly owned state of one laboratory bench.

Holds the selected material, light source and voltage, the accumulated
measurement log, I-V data and frequency data, and the latest Planck fit.
All mutation happens through the methods below, in the order user actions
arrive; nothing here renders anything.

Usage:
    from lab.session import ExperimentSession

    s = ExperimentSession()
    s.select_material('Cs')
    s.select_filter('blue')
    s.start()
    s.set_voltage(-0.4)
    record = s.take_measurement()
    print(s.regression.describe())
"""

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional, Tuple, Union

import numpy as np

from materials import (
    PhotocathodeMaterial, get_material, DEFAULT_FILTER, DEFAULT_MATERIAL,
)
from physics.light_source import FilterLight, CustomLight, CUSTOM_TAG, LightSource
from physics.photoelectric import PhysicsResult, compute_physics
from physics.physics_noise import make_rng
from simulation.measurement import MeasurementRecord, take_measurement
from simulation.frequency_data import FrequencyDataSet
from simulation.analysis import RegressionResult, fit_planck_constant

from .config import ExperimentConfig

logger = logging.getLogger(__name__)

# Monochromator setting before the user moves the slider (nm)
DEFAULT_CUSTOM_WAVELENGTH_nm = 438.0


@dataclass(frozen=True)
class LogEntry:
    """One line of the on-screen experiment log."""

    timestamp: datetime
    message: str

    def __str__(self) -> str:
        return f"[{self.timestamp.strftime('%H:%M:%S')}] {self.message}"


class ExperimentSession:
    """State and actions of one photoelectric experiment."""

    def __init__(self, config: Optional[ExperimentConfig] = None,
                 rng: Optional[np.random.Generator] = None):
        """
        Initialize session.

        Args:
            config: Simulation constants (defaults if None); validated here
            rng: Random source for all jitter. Defaults to a generator
                 seeded with config.seed.
        """
        self.config = (config or ExperimentConfig()).validate()
        self.rng = rng if rng is not None else make_rng(self.config.seed)

        self.material: PhotocathodeMaterial = get_material(DEFAULT_MATERIAL)
        self.light_source: LightSource = FilterLight(DEFAULT_FILTER)
        self.custom_wavelength_nm = DEFAULT_CUSTOM_WAVELENGTH_nm
        self.voltage_V = 0.0

        self.is_active = False
        self.sweep_active = False

        self._measurements: List[MeasurementRecord] = []
        self.iv_data: List[Tuple[float, float]] = []
        self.frequency_data = FrequencyDataSet(self.config.wavelength_tolerance_nm)
        self.regression: RegressionResult = fit_planck_constant([])

        self._log = deque(maxlen=self.config.log_capacity)
        self.log_message(
            "Laboratory simulator initialized - Ready for photoelectric effect experiment")

    # -------------------------------------------------------------------------
    # Log
    # -------------------------------------------------------------------------

    def log_message(self, message: str, level: int = logging.INFO) -> LogEntry:
        """Append to the bounded experiment log and the module logger."""
        entry = LogEntry(datetime.now(), message)
        self._log.append(entry)
        logger.log(level, message)
        return entry

    @property
    def experiment_log(self) -> Tuple[LogEntry, ...]:
        return tuple(self._log)

    # -------------------------------------------------------------------------
    # Parameter selection
    # -------------------------------------------------------------------------

    def select_material(self, material: Union[str, PhotocathodeMaterial]) -> PhotocathodeMaterial:
        """Select photocathode by name/symbol or instance."""
        if isinstance(material, str):
            material = get_material(material)
        self.material = material
        self.log_message(
            f"Material changed to {material.name} (φ = {material.work_function_eV} eV)")
        return material

    def select_filter(self, tag: str) -> LightSource:
        """Select a standard filter, or 'custom' for the monochromator."""
        if tag == CUSTOM_TAG:
            self.light_source = CustomLight(self.custom_wavelength_nm)
        else:
            self.light_source = FilterLight(tag)
        spectrum = self.light_source.resolve()
        self.log_message(
            f"Light set to {spectrum.filter_tag} ({spectrum.wavelength_nm:g} nm, "
            f"{spectrum.photon_energy_eV:.3f} eV)")
        return self.light_source

    def set_custom_wavelength(self, wavelength_nm: float) -> LightSource:
        """Switch to custom light at the given wavelength."""
        self.light_source = CustomLight(wavelength_nm)
        self.custom_wavelength_nm = wavelength_nm
        logger.debug("Custom wavelength %.1f nm", wavelength_nm)
        return self.light_source

    def set_voltage(self, voltage_V: float) -> float:
        """
        Set the applied voltage.

        Raises:
            ValueError: Outside [voltage_min_V, voltage_max_V]
        """
        lo, hi = self.config.voltage_min_V, self.config.voltage_max_V
        if not lo <= voltage_V <= hi:
            raise ValueError(
                f"Voltage {voltage_V} V outside the supply range [{lo}, {hi}] V")
        self.voltage_V = float(voltage_V)
        return self.voltage_V

    # -------------------------------------------------------------------------
    # Lamp
    # -------------------------------------------------------------------------

    def start(self) -> None:
        if not self.is_active:
            self.is_active = True
            self.log_message("Mercury lamp activated - Ready for measurements")

    def stop(self) -> None:
        if self.is_active:
            self.is_active = False
            self.log_message("Experiment stopped")

    def toggle(self) -> bool:
        """Start if stopped, stop if running. Returns the new state."""
        if self.is_active:
            self.stop()
        else:
            self.start()
        return self.is_active

    # -------------------------------------------------------------------------
    # Core operations
    # -------------------------------------------------------------------------

    def compute_physics(self) -> PhysicsResult:
        """Instantaneous photocell state for the current parameters."""
        cfg = self.config
        return compute_physics(
            self.material, self.light_source, self.voltage_V,
            saturation_current_uA=cfg.saturation_current_uA,
            current_jitter=cfg.current_jitter,
            rng=self.rng,
        )

    def take_measurement(self) -> MeasurementRecord:
        """
        Take one averaged precision measurement at the current settings.

        A first emission-positive measurement at a new wavelength adds a
        frequency data point and re-fits Planck's constant.

        Raises:
            RuntimeError: If the experiment has not been started
        """
        if not self.is_active:
            raise RuntimeError("Experiment is not active - start the lamp first")

        physics = self.compute_physics()
        record = take_measurement(
            physics,
            sample_count=int(self.config.sample_count),
            sample_jitter=self.config.sample_jitter,
            rng=self.rng,
        )

        self._measurements.append(record)
        self.iv_data.append((record.voltage_V, record.current_uA))
        self.log_message(
            f"Measurement: V={record.voltage_V:.2f}V, I={record.current_uA:.3f}μA "
            f"(±{record.standard_error_uA:.6f}μA)")

        if physics.is_emission:
            self.record_frequency_point(
                physics.wavelength_nm, physics.frequency_Hz,
                physics.stopping_potential_V, physics.filter_tag)

        return record

    def record_frequency_point(self, wavelength_nm: float, frequency_Hz: float,
                               stopping_potential_V: float, filter_tag: str) -> bool:
        """
        Insert a (ν, V_s) point if its wavelength is new; re-fit on insert.

        Returns:
            True if a point was inserted
        """
        inserted = self.frequency_data.record(
            wavelength_nm, frequency_Hz, stopping_potential_V, filter_tag)
        if inserted:
            self.log_message(
                f"New frequency point: {filter_tag} {wavelength_nm:g} nm, "
                f"V_s={stopping_potential_V:.3f} V")
            self.refit()
        else:
            logger.debug("Wavelength %.1f nm already recorded", wavelength_nm)
        return inserted

    def refit(self) -> RegressionResult:
        """Recompute the Planck fit over every frequency point."""
        self.regression = fit_planck_constant(self.frequency_data)
        if self.regression.is_available:
            self.log_message(f"Planck fit: {self.regression.describe()}")
        return self.regression

    # -------------------------------------------------------------------------
    # Accumulated data
    # -------------------------------------------------------------------------

    @property
    def measurements(self) -> Tuple[MeasurementRecord, ...]:
        return tuple(self._measurements)

    @property
    def measurement_count(self) -> int:
        return len(self._measurements)

    def clear_iv_data(self) -> None:
        self.iv_data.clear()

    def clear_graphs(self) -> None:
        """Drop plotted data (I-V and frequency points); keeps the log."""
        self.iv_data.clear()
        self.frequency_data.clear()
        self.regression = fit_planck_constant([])
        self.log_message("Graphs cleared")

    def reset(self) -> None:
        """Back to the initial bench state: lamp off, voltage 0, no data."""
        self.is_active = False
        self.sweep_active = False
        self._measurements.clear()
        self.voltage_V = 0.0
        self.clear_graphs()
        self.log_message("Laboratory reset - Ready for new experiment")

    def export_csv(self, path=None):
        """Write the session to CSV; see lab.export.export_csv."""
        from .export import export_csv
        result = export_csv(self.measurements, self.frequency_data.points, path)
        if result.status == 'empty':
            self.log_message(result.message, logging.WARNING)
        else:
            self.log_message(result.message)
        return result

    def summary(self) -> dict:
        """Counts and current selections, for the CLI and logs."""
        return {
            'material': self.material.name,
            'light': self.light_source.resolve().filter_tag,
            'voltage_V': self.voltage_V,
            'active': self.is_active,
            'n_measurements': self.measurement_count,
            'n_frequency_points': len(self.frequency_data),
            'planck': self.regression.describe(),
        }
