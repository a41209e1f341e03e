"""
Measurement and analysis modules for the Photoelectric Effect Simulator

    - measurement: synthetic precision-measurement sampler
    - frequency_data: one (ν, V_s) point per distinct wavelength
    - analysis: least-squares determination of Planck's constant
"""

from .measurement import (
    MeasurementRecord,
    take_measurement,
    sample_statistics,
    DEFAULT_SAMPLE_COUNT,
    DEFAULT_SAMPLE_JITTER,
)
from .frequency_data import (
    FrequencyDataPoint,
    FrequencyDataSet,
    record_frequency_point,
    DEFAULT_WAVELENGTH_TOLERANCE_nm,
)
from .analysis import (
    RegressionResult,
    fit_planck_constant,
    stopping_potential_line,
    STATUS_OK,
    STATUS_INSUFFICIENT,
    STATUS_NON_COMPUTABLE,
    PLACEHOLDER,
)

__all__ = [
    'MeasurementRecord',
    'take_measurement',
    'sample_statistics',
    'DEFAULT_SAMPLE_COUNT',
    'DEFAULT_SAMPLE_JITTER',
    'FrequencyDataPoint',
    'FrequencyDataSet',
    'record_frequency_point',
    'DEFAULT_WAVELENGTH_TOLERANCE_nm',
    'RegressionResult',
    'fit_planck_constant',
    'stopping_potential_line',
    'STATUS_OK',
    'STATUS_INSUFFICIENT',
    'STATUS_NON_COMPUTABLE',
    'PLACEHOLDER',
]
