"""
Laboratory bench tests: configuration, session state, automatic sweep,
CSV export and the command-line interface.

Run with:  pytest tests/test_lab.py -v
"""

import sys
import csv
import json
import logging
import dataclasses
from pathlib import Path

import numpy as np
import pytest

# ---------------------------------------------------------------------------
# Path setup: ensure the project root is on sys.path
# ---------------------------------------------------------------------------
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_PROJECT_ROOT))


def _quiet_session(**overrides):
    """Noise-free session with no sweep pacing."""
    from lab import ExperimentConfig, ExperimentSession
    cfg = ExperimentConfig(current_jitter=0.0, sample_jitter=0.0,
                           sweep_pause_s=0.0, seed=0, **overrides)
    return ExperimentSession(cfg)


# ============================================================================
# 1. ExperimentConfig
# ============================================================================

class TestExperimentConfig:
    """Tests for lab/config.py."""

    def test_defaults(self):
        from lab import ExperimentConfig
        cfg = ExperimentConfig()
        assert cfg.saturation_current_uA == 15.0
        assert cfg.sample_count == 1000
        assert cfg.current_jitter == 0.001
        assert cfg.sweep_start_V == 2.0
        assert cfg.sweep_stop_V == -3.0
        assert cfg.sweep_step_V == 0.2
        assert cfg.log_capacity == 20

    def test_default_sweep_has_26_steps(self):
        from lab import ExperimentConfig
        assert ExperimentConfig().sweep_step_count() == 26

    def test_list_presets(self):
        from lab import ExperimentConfig
        presets = ExperimentConfig.list_presets()
        assert {'laboratory_manual', 'noiseless', 'quick_sweep'} <= set(presets)

    def test_from_preset_noiseless(self):
        from lab import ExperimentConfig
        cfg = ExperimentConfig.from_preset('noiseless')
        assert cfg.preset_name == 'noiseless'
        assert cfg.current_jitter == 0.0
        assert cfg.sample_jitter == 0.0

    def test_from_preset_quick_sweep(self):
        from lab import ExperimentConfig
        cfg = ExperimentConfig.from_preset('quick_sweep')
        assert cfg.sweep_step_count() == 11

    def test_unknown_preset(self):
        from lab import ExperimentConfig
        with pytest.raises(FileNotFoundError, match='Available'):
            ExperimentConfig.from_preset('does_not_exist')

    def test_save_load_roundtrip(self, tmp_path):
        from lab import ExperimentConfig
        cfg = ExperimentConfig(sample_count=250, seed=7, sweep_step_V=0.1)
        path = tmp_path / 'cfg.json'
        cfg.save(path)
        loaded = ExperimentConfig.load(path)
        assert loaded == cfg

    def test_load_ignores_unknown_keys(self, tmp_path):
        from lab import ExperimentConfig
        path = tmp_path / 'old.json'
        path.write_text(json.dumps({'sample_count': 50, 'lamp_model': 'HBO'}))
        assert ExperimentConfig.load(path).sample_count == 50

    @pytest.mark.parametrize("field,value", [
        ('saturation_current_uA', 0.0),
        ('current_jitter', -0.1),
        ('sample_count', 0),
        ('sample_count', 2.5),
        ('voltage_min_V', 5.0),
        ('sweep_step_V', 0.0),
        ('sweep_stop_V', -6.0),
        ('wavelength_tolerance_nm', 0.0),
        ('log_capacity', 0),
    ])
    def test_validate_rejects(self, field, value):
        from lab import ExperimentConfig
        cfg = dataclasses.replace(ExperimentConfig(), **{field: value})
        with pytest.raises(ValueError):
            cfg.validate()

    def test_str(self):
        from lab import ExperimentConfig
        assert 'Custom' in str(ExperimentConfig())


# ============================================================================
# 2. ExperimentSession
# ============================================================================

class TestExperimentSession:
    """Tests for lab/session.py."""

    def test_initial_state(self):
        from lab import ExperimentSession
        s = ExperimentSession()
        assert s.material.symbol == 'Cs'
        assert s.light_source.tag == 'blue'
        assert s.voltage_V == 0.0
        assert s.is_active is False
        assert s.measurement_count == 0
        assert not s.regression.is_available
        assert 'initialized' in s.experiment_log[0].message

    def test_measurement_requires_active_lamp(self):
        s = _quiet_session()
        with pytest.raises(RuntimeError):
            s.take_measurement()

    def test_toggle(self):
        s = _quiet_session()
        assert s.toggle() is True
        assert s.toggle() is False

    def test_set_voltage_range(self):
        s = _quiet_session()
        assert s.set_voltage(-5.0) == -5.0
        with pytest.raises(ValueError):
            s.set_voltage(5.5)
        assert s.voltage_V == -5.0

    def test_select_material_by_name(self):
        s = _quiet_session()
        mat = s.select_material('Sodium')
        assert s.material is mat
        assert mat.work_function_eV == 2.28

    def test_select_unknown_filter(self):
        s = _quiet_session()
        with pytest.raises(KeyError):
            s.select_filter('violet')
        assert s.light_source.tag == 'blue'

    def test_custom_light(self):
        s = _quiet_session()
        s.set_custom_wavelength(400)
        assert s.light_source.tag == 'custom'
        assert s.compute_physics().frequency_Hz == pytest.approx(7.5e14)
        s.select_filter('green')
        s.select_filter('custom')
        assert s.compute_physics().wavelength_nm == 400

    def test_take_measurement_records_everything(self):
        s = _quiet_session()
        s.start()
        s.set_voltage(-0.2)
        rec = s.take_measurement()
        assert s.measurement_count == 1
        assert s.measurements[0] is rec
        assert s.iv_data == [(-0.2, rec.current_uA)]
        assert len(s.frequency_data) == 1
        assert s.frequency_data.points[0].stopping_potential_V == pytest.approx(0.733)

    def test_below_threshold_adds_no_frequency_point(self):
        s = _quiet_session()
        s.start()
        s.select_filter('orange')
        rec = s.take_measurement()
        assert rec.current_uA == 0.0
        assert s.measurement_count == 1
        assert len(s.frequency_data) == 0

    def test_same_wavelength_recorded_once(self):
        s = _quiet_session()
        s.start()
        s.take_measurement()
        s.set_voltage(-0.5)
        s.take_measurement()
        assert s.measurement_count == 2
        assert len(s.frequency_data) == 1

    def test_planck_fit_over_filters(self):
        s = _quiet_session()
        s.start()
        for tag in ['blue', 'green', 'yellow', 'orange']:
            s.select_filter(tag)
            s.take_measurement()
        assert len(s.frequency_data) == 3
        assert s.regression.is_available
        assert s.regression.accuracy_percent == pytest.approx(100.0, abs=1.0)
        assert s.regression.work_function_eV == pytest.approx(2.10, abs=0.05)

    def test_one_point_fit_is_insufficient(self):
        from simulation import STATUS_INSUFFICIENT
        s = _quiet_session()
        s.start()
        s.take_measurement()
        assert s.regression.status == STATUS_INSUFFICIENT

    def test_clear_graphs_keeps_measurements_and_log(self):
        s = _quiet_session()
        s.start()
        s.take_measurement()
        n_log = len(s.experiment_log)
        s.clear_graphs()
        assert s.iv_data == []
        assert len(s.frequency_data) == 0
        assert not s.regression.is_available
        assert s.measurement_count == 1
        assert len(s.experiment_log) == n_log + 1

    def test_reset(self):
        s = _quiet_session()
        s.start()
        s.set_voltage(1.0)
        s.take_measurement()
        s.reset()
        assert s.is_active is False
        assert s.voltage_V == 0.0
        assert s.measurement_count == 0
        assert s.iv_data == []
        assert len(s.frequency_data) == 0
        assert 'reset' in s.experiment_log[-1].message

    def test_log_is_bounded(self):
        s = _quiet_session(log_capacity=5)
        for i in range(12):
            s.log_message(f'entry {i}')
        log = s.experiment_log
        assert len(log) == 5
        assert log[-1].message == 'entry 11'
        assert log[0].message == 'entry 7'

    def test_log_mirrors_to_logger(self, caplog):
        s = _quiet_session()
        with caplog.at_level(logging.INFO, logger='lab.session'):
            s.start()
        assert 'Mercury lamp activated' in caplog.text

    def test_seeded_sessions_reproducible(self):
        from lab import ExperimentConfig, ExperimentSession
        a = ExperimentSession(ExperimentConfig(seed=123))
        b = ExperimentSession(ExperimentConfig(seed=123))
        a.start()
        b.start()
        assert a.take_measurement().current_uA == b.take_measurement().current_uA

    def test_summary(self):
        s = _quiet_session()
        info = s.summary()
        assert info['material'] == 'Cesium'
        assert info['light'] == 'blue'
        assert info['n_measurements'] == 0
        assert '--' in info['planck']


# ============================================================================
# 3. Voltage Sweep
# ============================================================================

class TestVoltageSweep:
    """Tests for lab/sweep.py."""

    def test_sweep_voltages_endpoints(self):
        from lab import sweep_voltages
        v = sweep_voltages(2.0, -3.0, 0.2)
        assert len(v) == 26
        assert v[0] == 2.0
        assert v[-1] == -3.0
        assert np.all(np.diff(v) < 0)

    def test_sweep_voltages_does_not_overshoot(self):
        from lab import sweep_voltages
        v = sweep_voltages(0.0, 1.0, 0.3)
        assert list(v) == [0.0, 0.3, 0.6, 0.9]

    def test_sweep_voltages_rejects_bad_step(self):
        from lab import sweep_voltages
        with pytest.raises(ValueError):
            sweep_voltages(2.0, -3.0, 0.0)

    def test_full_sweep(self):
        from lab import VoltageSweep
        s = _quiet_session()
        s.start()
        s.take_measurement()
        result = VoltageSweep(s).run()
        assert result.status == 'done'
        assert len(result.records) == 26
        # I-V data was cleared before the sweep
        assert len(s.iv_data) == 26
        assert s.measurement_count == 27
        assert s.sweep_active is False
        currents = np.array(result.currents)
        assert currents[0] == pytest.approx(15.0)
        assert currents[-1] == 0.0
        assert np.all(np.diff(currents) <= 1e-12)

    def test_sweep_skipped_when_inactive(self):
        from lab import VoltageSweep
        s = _quiet_session()
        result = VoltageSweep(s).run()
        assert result.status == 'skipped'
        assert result.records == []
        assert s.measurement_count == 0

    def test_sweep_not_reentrant(self):
        from lab import VoltageSweep
        s = _quiet_session()
        s.start()
        nested = []

        def on_step(v, rec):
            if not nested:
                nested.append(VoltageSweep(s).run())

        result = VoltageSweep(s, on_step=on_step).run()
        assert result.status == 'done'
        assert nested[0].status == 'skipped'
        assert s.measurement_count == 26

    def test_pause_between_steps_only(self):
        from lab import VoltageSweep
        s = _quiet_session()
        s.start()
        pauses = []
        VoltageSweep(s, pause_s=0.1, sleep=pauses.append).run()
        assert pauses == [0.1] * 25

    def test_sweep_error_releases_lock(self):
        from lab import VoltageSweep
        s = _quiet_session()
        s.start()
        result = VoltageSweep(s, stop_V=-6.0).run()
        assert result.status == 'error'
        assert 'outside' in result.message
        assert s.sweep_active is False
        assert len(result.records) == 36

    def test_custom_step(self):
        from lab import VoltageSweep
        s = _quiet_session()
        s.start()
        result = VoltageSweep(s, step_V=0.5).run()
        assert len(result.voltages) == 11


# ============================================================================
# 4. CSV Export
# ============================================================================

class TestExport:
    """Tests for lab/export.py."""

    def _session_with_data(self):
        s = _quiet_session()
        s.start()
        for tag in ['blue', 'green']:
            s.select_filter(tag)
            s.take_measurement()
        return s

    def test_empty_export(self, tmp_path):
        s = _quiet_session()
        result = s.export_csv(tmp_path / 'out.csv')
        assert result.status == 'empty'
        assert result.path is None
        assert not (tmp_path / 'out.csv').exists()

    def test_written_export_layout(self, tmp_path):
        from lab.export import MEASUREMENT_HEADER, FREQUENCY_HEADER, FREQUENCY_SECTION_TITLE
        s = self._session_with_data()
        result = s.export_csv(tmp_path / 'out.csv')
        assert result.status == 'written'
        assert result.n_measurements == 2
        assert result.n_points == 2

        lines = result.path.read_text(encoding='utf-8').splitlines()
        assert lines[0] == ','.join(MEASUREMENT_HEADER)
        assert len(lines[1].split(',')) == 12
        assert lines[3] == ''
        assert lines[4] == FREQUENCY_SECTION_TITLE
        assert lines[5] == ','.join(FREQUENCY_HEADER)
        assert lines[6].startswith('blue,438')
        assert len(lines) == 8

    def test_rows_parse_as_csv(self, tmp_path):
        s = self._session_with_data()
        path = s.export_csv(tmp_path / 'out.csv').path
        with open(path, newline='', encoding='utf-8') as fh:
            rows = list(csv.reader(fh))
        first = rows[1]
        assert first[1] == 'Cesium'
        assert first[3] == 'blue'
        assert float(first[8]) == pytest.approx(15.0)
        assert int(first[10]) == 1000

    def test_directory_target_uses_default_name(self, tmp_path):
        s = self._session_with_data()
        result = s.export_csv(tmp_path)
        assert result.path.parent == tmp_path
        assert result.path.name.startswith('photoelectric_lab_data_')
        assert result.path.suffix == '.csv'

    def test_format_csv_without_points(self):
        from lab import format_csv
        s = _quiet_session()
        s.start()
        s.select_filter('orange')
        s.take_measurement()
        text = format_csv(s.measurements, s.frequency_data.points)
        assert text.rstrip('\n').endswith('Stopping_Potential_V')


# ============================================================================
# 5. CLI
# ============================================================================

class TestCLI:
    """Tests for cli.py."""

    def test_no_command_prints_help(self, capsys):
        from cli import main
        assert main([]) == 0
        assert 'usage' in capsys.readouterr().out.lower()

    def test_materials(self, capsys):
        from cli import main
        assert main(['materials']) == 0
        out = capsys.readouterr().out
        assert 'Cesium' in out
        assert 'Gold' in out

    def test_filters(self, capsys):
        from cli import main
        assert main(['filters']) == 0
        assert 'orange' in capsys.readouterr().out

    def test_physics(self, capsys):
        from cli import main
        assert main(['--preset', 'noiseless', 'physics', '-m', 'Cs', '-f', 'blue']) == 0
        out = capsys.readouterr().out
        assert '0.733 V' in out
        assert '15.000' in out

    def test_physics_unknown_material(self, capsys):
        from cli import main
        assert main(['physics', '-m', 'Unobtainium']) == 1
        assert 'not found' in capsys.readouterr().err

    def test_planck(self, capsys):
        from cli import main
        assert main(['--seed', '1', 'planck']) == 0
        out = capsys.readouterr().out
        assert 'eV·s' in out

    def test_planck_single_filter_shows_placeholder(self, capsys):
        from cli import main
        assert main(['--seed', '1', 'planck', 'blue']) == 0
        assert 'h = --' in capsys.readouterr().out

    def test_sweep(self, capsys):
        from cli import main
        assert main(['--preset', 'quick_sweep', 'sweep']) == 0
        assert 'done' in capsys.readouterr().out

    def test_export(self, tmp_path, capsys):
        from cli import main
        assert main(['--preset', 'noiseless', 'export', 'blue', '-o', str(tmp_path)]) == 0
        files = list(tmp_path.glob('photoelectric_lab_data_*.csv'))
        assert len(files) == 1

    def test_presets(self, capsys):
        from cli import main
        assert main(['presets']) == 0
        assert 'noiseless' in capsys.readouterr().out
        assert main(['presets', 'quick_sweep']) == 0
        assert 'sweep_step_V' in capsys.readouterr().out
