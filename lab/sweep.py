# lab/sweep.py
"""
Automatic I-V sweep.

Steps the session voltage from start to stop, taking a precision
measurement at every step. The pause between steps only paces the
display; it has no effect on the physics. A session runs at most one
sweep at a time (session.sweep_active).

Usage:
    from lab.sweep import VoltageSweep

    sweep = VoltageSweep(session, on_step=lambda v, rec: print(v, rec.current_uA))
    result = sweep.run()
    print(result.status, len(result.records))
"""

import logging
import math
import time as _time
from typing import Callable, List, Optional

import numpy as np

from simulation.measurement import MeasurementRecord
from .session import ExperimentSession

logger = logging.getLogger(__name__)


def sweep_voltages(start_V: float, stop_V: float, step_V: float) -> np.ndarray:
    """
    Voltages visited by a sweep, both endpoints included.

    Each value is start ± k·step (no accumulated float drift); the sweep
    never passes stop when the span is not a whole number of steps.
    """
    if step_V <= 0:
        raise ValueError(f"Sweep step must be > 0, got {step_V}")
    span = abs(stop_V - start_V)
    n = int(math.floor(span / step_V + 1e-9)) + 1
    direction = -1.0 if stop_V < start_V else 1.0
    return np.round(start_V + direction * step_V * np.arange(n), 9)


class SweepResult:
    """Result of one sweep run."""

    def __init__(self):
        self.status = 'pending'       # pending | running | done | skipped | error
        self.message = ''
        self.duration_s = 0.0
        self.records: List[MeasurementRecord] = []

    @property
    def voltages(self) -> List[float]:
        return [r.voltage_V for r in self.records]

    @property
    def currents(self) -> List[float]:
        return [r.current_uA for r in self.records]

    def __repr__(self):
        return f"SweepResult({self.status}, {len(self.records)} points)"


class VoltageSweep:
    """Sequential I-V sweep driver for an ExperimentSession."""

    def __init__(self, session: ExperimentSession,
                 start_V: Optional[float] = None,
                 stop_V: Optional[float] = None,
                 step_V: Optional[float] = None,
                 pause_s: Optional[float] = None,
                 sleep: Callable[[float], None] = _time.sleep,
                 on_step: Optional[Callable] = None):
        """
        Initialize sweep. Unset endpoints/step/pause come from session.config.

        Args:
            session: Session to drive
            start_V, stop_V, step_V: Sweep definition (V)
            pause_s: Pause between steps (s)
            sleep: Pause implementation (replace in tests)
            on_step: Optional callback(voltage_V, record) after each step
        """
        cfg = session.config
        self.session = session
        self.start_V = cfg.sweep_start_V if start_V is None else start_V
        self.stop_V = cfg.sweep_stop_V if stop_V is None else stop_V
        self.step_V = cfg.sweep_step_V if step_V is None else step_V
        self.pause_s = cfg.sweep_pause_s if pause_s is None else pause_s
        self.sleep = sleep
        self.on_step = on_step

    def voltages(self) -> np.ndarray:
        return sweep_voltages(self.start_V, self.stop_V, self.step_V)

    def _skip(self, result: SweepResult, reason: str) -> SweepResult:
        result.status = 'skipped'
        result.message = reason
        self.session.log_message(f"Sweep skipped: {reason}", logging.WARNING)
        return result

    def run(self) -> SweepResult:
        """
        Run the sweep to completion.

        Returns a 'skipped' result without touching the session when the
        experiment is inactive or another sweep is in progress.
        """
        result = SweepResult()
        session = self.session

        if not session.is_active:
            return self._skip(result, 'experiment is not active')
        if session.sweep_active:
            return self._skip(result, 'a sweep is already in progress')

        voltages = self.voltages()
        session.sweep_active = True
        result.status = 'running'
        t0 = _time.time()
        session.log_message(
            f"Starting automatic I-V sweep from {self.start_V:+.1f}V "
            f"to {self.stop_V:+.1f}V")
        session.clear_iv_data()

        try:
            for i, v in enumerate(voltages):
                session.set_voltage(float(v))
                record = session.take_measurement()
                result.records.append(record)
                logger.debug("Sweep step %d/%d: V=%.2f I=%.4f",
                             i + 1, len(voltages), v, record.current_uA)
                if self.on_step:
                    self.on_step(float(v), record)
                if self.pause_s > 0 and i < len(voltages) - 1:
                    self.sleep(self.pause_s)

            result.status = 'done'
            result.message = f'{len(result.records)} points'
            session.log_message("I-V sweep completed - Stopping potential determined")

        except (RuntimeError, ValueError) as e:
            result.status = 'error'
            result.message = str(e)
            logger.error("Sweep aborted after %d points: %s", len(result.records), e)

        finally:
            session.sweep_active = False
            result.duration_s = _time.time() - t0

        return result
