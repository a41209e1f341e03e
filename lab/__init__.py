# lab/__init__.py
"""
Laboratory bench for the Photoelectric Effect Simulator

Owns the experiment state and drives the physics/measurement core:

Modules:
    config   - ExperimentConfig dataclass + JSON presets
    session  - ExperimentSession (selections, logs, Planck fit)
    sweep    - Automatic I-V sweep driver
    export   - CSV export
"""

from .config import ExperimentConfig
from .session import ExperimentSession, LogEntry
from .sweep import VoltageSweep, SweepResult, sweep_voltages
from .export import ExportResult, export_csv, format_csv

__all__ = [
    'ExperimentConfig',
    'ExperimentSession',
    'LogEntry',
    'VoltageSweep',
    'SweepResult',
    'sweep_voltages',
    'ExportResult',
    'export_csv',
    'format_csv',
]
