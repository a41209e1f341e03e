# lab/config.py
"""
ExperimentConfig - Tunable simulation constants for a laboratory session.

The saturation current and the jitter widths are simulation choices, not
physics; they live here instead of being hard-coded in the engine.

Usage:
    from lab.config import ExperimentConfig

    cfg = ExperimentConfig()                           # defaults
    cfg = ExperimentConfig.from_preset('noiseless')    # load preset
    cfg.save('my_config.json')
    cfg = ExperimentConfig.load('my_config.json')
"""

import json
import math
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Optional


PRESETS_DIR = Path(__file__).parent / 'presets'


@dataclass
class ExperimentConfig:
    """Complete configuration of a simulated photoelectric experiment."""

    # -- Photocell model -------------------------------------------------------
    saturation_current_uA: float = 15.0
    current_jitter: float = 0.001          # full width, ±0.05 %

    # -- Precision measurement -------------------------------------------------
    sample_count: int = 1000
    sample_jitter: float = 0.001           # full width, ±0.05 %

    # -- Controls --------------------------------------------------------------
    voltage_min_V: float = -5.0
    voltage_max_V: float = 5.0
    wavelength_tolerance_nm: float = 1.0

    # -- Automatic I-V sweep ---------------------------------------------------
    sweep_start_V: float = 2.0
    sweep_stop_V: float = -3.0
    sweep_step_V: float = 0.2
    sweep_pause_s: float = 0.1

    # -- Session ---------------------------------------------------------------
    seed: Optional[int] = None
    log_capacity: int = 20

    # -- Metadata --------------------------------------------------------------
    preset_name: str = ''
    description: str = ''

    def validate(self) -> 'ExperimentConfig':
        """
        Check value ranges.

        Returns:
            self, for chaining

        Raises:
            ValueError: On the first invalid field
        """
        if self.saturation_current_uA <= 0:
            raise ValueError(
                f"saturation_current_uA must be > 0, got {self.saturation_current_uA}")
        if self.current_jitter < 0 or self.sample_jitter < 0:
            raise ValueError("Jitter widths must be >= 0")
        if int(self.sample_count) != self.sample_count or self.sample_count <= 0:
            raise ValueError(f"sample_count must be a positive integer, got {self.sample_count}")
        if self.voltage_min_V >= self.voltage_max_V:
            raise ValueError(
                f"Voltage range is empty: [{self.voltage_min_V}, {self.voltage_max_V}]")
        if self.wavelength_tolerance_nm <= 0:
            raise ValueError("wavelength_tolerance_nm must be > 0")
        if self.sweep_step_V <= 0:
            raise ValueError(f"sweep_step_V must be > 0, got {self.sweep_step_V}")
        for v in (self.sweep_start_V, self.sweep_stop_V):
            if not self.voltage_min_V <= v <= self.voltage_max_V:
                raise ValueError(f"Sweep endpoint {v} V outside the voltage range")
        if self.sweep_pause_s < 0:
            raise ValueError("sweep_pause_s must be >= 0")
        if self.log_capacity <= 0:
            raise ValueError("log_capacity must be > 0")
        return self

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Convert to plain dict."""
        return asdict(self)

    def to_json(self, indent: int = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def save(self, path) -> None:
        """Save configuration to JSON file."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.to_json(), encoding='utf-8')

    @classmethod
    def load(cls, path) -> 'ExperimentConfig':
        """Load configuration from JSON file."""
        path = Path(path)
        data = json.loads(path.read_text(encoding='utf-8'))
        # Filter out unknown keys so old configs still load
        valid_fields = {f.name for f in cls.__dataclass_fields__.values()}
        filtered = {k: v for k, v in data.items() if k in valid_fields}
        return cls(**filtered)

    @classmethod
    def from_preset(cls, name: str) -> 'ExperimentConfig':
        """
        Load a named preset from the presets/ directory.

        Args:
            name: Preset name (without .json extension)

        Returns:
            ExperimentConfig with preset values
        """
        path = PRESETS_DIR / f'{name}.json'
        if not path.exists():
            available = [p.stem for p in PRESETS_DIR.glob('*.json')]
            raise FileNotFoundError(
                f"Preset '{name}' not found. Available: {available}")
        return cls.load(path)

    @classmethod
    def list_presets(cls) -> list:
        """List available preset names."""
        if not PRESETS_DIR.exists():
            return []
        return sorted(p.stem for p in PRESETS_DIR.glob('*.json'))

    # -------------------------------------------------------------------------
    # Derived quantities (convenience)
    # -------------------------------------------------------------------------

    def sweep_step_count(self) -> int:
        """Number of measurements one automatic sweep takes."""
        span = abs(self.sweep_start_V - self.sweep_stop_V)
        return int(math.floor(span / self.sweep_step_V + 1e-9)) + 1

    def __str__(self) -> str:
        name = self.preset_name or 'Custom'
        return (f"ExperimentConfig({name}: "
                f"I_sat={self.saturation_current_uA:g}uA, "
                f"N={self.sample_count}, "
                f"jitter={self.current_jitter:g}/{self.sample_jitter:g}, "
                f"sweep {self.sweep_start_V:+g}->{self.sweep_stop_V:+g}V)")
