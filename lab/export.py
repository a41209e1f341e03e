# lab/export.py
"""
CSV export of a laboratory session.

Layout:
    12-column measurement table (one row per MeasurementRecord)
    blank line
    # Frequency vs Stopping Potential Data
    4-column frequency table (one row per FrequencyDataPoint)

An export with no measurements writes nothing and reports status 'empty';
file-system failures propagate as OSError.
"""

import csv
import io
import time as _time
from pathlib import Path
from typing import Optional, Sequence

from simulation.measurement import MeasurementRecord
from simulation.frequency_data import FrequencyDataPoint

MEASUREMENT_HEADER = [
    'Timestamp',
    'Material',
    'Work_Function_eV',
    'Filter',
    'Wavelength_nm',
    'Frequency_Hz',
    'Photon_Energy_eV',
    'Applied_Voltage_V',
    'Current_microA',
    'Standard_Error_microA',
    'Measurements_Count',
    'Stopping_Potential_V',
]

FREQUENCY_SECTION_TITLE = '# Frequency vs Stopping Potential Data'

FREQUENCY_HEADER = ['Filter', 'Wavelength_nm', 'Frequency_Hz', 'Stopping_Potential_V']


class ExportResult:
    """Outcome of an export attempt."""

    def __init__(self, status: str, path: Optional[Path] = None,
                 n_measurements: int = 0, n_points: int = 0, message: str = ''):
        self.status = status          # written | empty
        self.path = path
        self.n_measurements = n_measurements
        self.n_points = n_points
        self.message = message

    def __repr__(self):
        return f"ExportResult({self.status}: {self.path})"


def default_filename() -> str:
    """photoelectric_lab_data_<epoch ms>.csv"""
    return f'photoelectric_lab_data_{int(_time.time() * 1000)}.csv'


def _measurement_row(r: MeasurementRecord) -> list:
    return [
        r.timestamp.isoformat(),
        r.material,
        f'{r.work_function_eV:.6f}',
        r.filter_tag,
        f'{r.wavelength_nm:g}',
        f'{r.frequency_Hz:.3e}',
        f'{r.photon_energy_eV:.6f}',
        f'{r.voltage_V:.6f}',
        f'{r.current_uA:.6f}',
        f'{r.standard_error_uA:.3e}',
        r.sample_count,
        f'{r.stopping_potential_V:.6f}',
    ]


def _frequency_row(p: FrequencyDataPoint) -> list:
    return [
        p.filter_tag,
        f'{p.wavelength_nm:g}',
        f'{p.frequency_Hz:.6e}',
        f'{p.stopping_potential_V:.6f}',
    ]


def format_csv(records: Sequence[MeasurementRecord],
               points: Sequence[FrequencyDataPoint]) -> str:
    """Render the full export as a string."""
    buf = io.StringIO()
    writer = csv.writer(buf, lineterminator='\n')

    writer.writerow(MEASUREMENT_HEADER)
    for r in records:
        writer.writerow(_measurement_row(r))

    buf.write('\n')
    buf.write(FREQUENCY_SECTION_TITLE + '\n')
    writer.writerow(FREQUENCY_HEADER)
    for p in points:
        writer.writerow(_frequency_row(p))

    return buf.getvalue()


def export_csv(records: Sequence[MeasurementRecord],
               points: Sequence[FrequencyDataPoint],
               path=None) -> ExportResult:
    """
    Write measurements and frequency points to a CSV file.

    Args:
        records: Measurement log
        points: Frequency data points
        path: Output file, or directory to place default_filename() in,
              or None for the current directory

    Returns:
        ExportResult with status 'written' or 'empty'
    """
    if len(records) == 0:
        return ExportResult(
            'empty',
            message='No experimental data to export. Please take measurements first.')

    path = Path(path) if path is not None else Path(default_filename())
    if path.is_dir():
        path = path / default_filename()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(format_csv(records, points), encoding='utf-8')

    return ExportResult(
        'written', path=path,
        n_measurements=len(records), n_points=len(points),
        message=(f"Laboratory data exported: {len(records)} measurements, "
                 f"{len(points)} frequency points"))
