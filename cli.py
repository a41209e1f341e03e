#!/usr/bin/env python
"""
Photoelectric Effect Laboratory CLI
===================================
Usage:  python cli.py <command> [options]
"""

import argparse
import logging
import sys

import numpy as np


# ── helpers ──────────────────────────────────────────────────────────────
def _header(title):
    print(f"\n{'='*50}")
    print(f"  {title}")
    print(f"{'='*50}\n")


def _make_session(args):
    from lab.config import ExperimentConfig
    from lab.session import ExperimentSession

    cfg = ExperimentConfig.from_preset(args.preset) if args.preset else ExperimentConfig()
    if args.seed is not None:
        cfg.seed = args.seed
    session = ExperimentSession(cfg)
    if getattr(args, 'material', None):
        session.select_material(args.material)
    if getattr(args, 'wavelength', None) is not None:
        session.set_custom_wavelength(args.wavelength)
    elif getattr(args, 'filter', None):
        session.select_filter(args.filter)
    if getattr(args, 'voltage', None) is not None:
        session.set_voltage(args.voltage)
    return session


def _add_bench_args(p, voltage=True):
    p.add_argument('-m', '--material', default='Cs', help='Material name or symbol')
    p.add_argument('-f', '--filter', default='blue', help='Standard filter tag')
    p.add_argument('-w', '--wavelength', type=float, help='Custom wavelength (nm)')
    if voltage:
        p.add_argument('-V', '--voltage', type=float, default=0.0, help='Applied voltage (V)')


# ── commands ─────────────────────────────────────────────────────────────

def cmd_materials(args):
    """List photocathode materials."""
    from materials import MATERIALS_DATABASE
    from physics import threshold_frequency, threshold_wavelength

    _header("PHOTOCATHODE MATERIALS")
    print(f"  {'Material':12s} {'Sym':4s} {'φ (eV)':>7s} {'f0 (1e14 Hz)':>13s} {'λ0 (nm)':>8s}")
    for mat in MATERIALS_DATABASE.values():
        phi = mat.work_function_eV
        print(f"  {mat.name:12s} {mat.symbol:4s} {phi:7.2f} "
              f"{threshold_frequency(phi)/1e14:13.3f} {threshold_wavelength(phi):8.0f}")


def cmd_filters(args):
    """List standard filters."""
    from materials import FILTER_DATABASE

    _header("STANDARD FILTERS")
    print(f"  {'Filter':8s} {'λ (nm)':>7s} {'f (1e14 Hz)':>12s} {'E (eV)':>7s}")
    for f in FILTER_DATABASE.values():
        print(f"  {f.tag:8s} {f.wavelength_nm:7.0f} {f.frequency_e14:12.3f} "
              f"{f.photon_energy_eV:7.3f}")


def cmd_physics(args):
    """Show instantaneous photoelectric quantities."""
    session = _make_session(args)
    p = session.compute_physics()

    _header(f"PHYSICS: {p.material} / {p.filter_tag}")
    rows = [
        ('Wavelength',          f"{p.wavelength_nm:g} nm"),
        ('Frequency',           f"{p.frequency_Hz/1e14:.3f} × 10¹⁴ Hz"),
        ('Photon energy',       f"{p.photon_energy_eV:.3f} eV"),
        ('Work function',       f"{p.work_function_eV:.3f} eV"),
        ('Max kinetic energy',  f"{p.max_kinetic_energy_eV:.3f} eV"),
        ('Stopping potential',  f"{p.stopping_potential_V:.3f} V"),
        ('Threshold frequency', f"{p.threshold_frequency_Hz/1e14:.2f} × 10¹⁴ Hz"),
        ('Threshold wavelength', f"{p.threshold_wavelength_nm:.0f} nm"),
        ('Applied voltage',     f"{p.voltage_V:.2f} V"),
        ('Current',             f"{p.current_uA:.3f} μA"),
        ('Emission',            'yes' if p.is_emission else 'no - below threshold'),
    ]
    for k, v in rows:
        print(f"  {k:22s}  {v}")


def cmd_measure(args):
    """Take one precision measurement."""
    session = _make_session(args)
    session.start()
    rec = session.take_measurement()

    _header("PRECISION MEASUREMENT")
    print(f"  V = {rec.voltage_V:+.2f} V")
    print(f"  I = {rec.current_uA:.6f} μA  ± {rec.standard_error_uA:.3e} μA "
          f"(N={rec.sample_count}, σ={rec.standard_deviation_uA:.3e})")
    print(f"  Relative error: {rec.relative_error*100:.5f} %")


def cmd_sweep(args):
    """Run the automatic I-V sweep."""
    from lab.sweep import VoltageSweep

    session = _make_session(args)
    session.start()

    _header(f"I-V SWEEP: {session.material.name}")

    def on_step(v, rec):
        bar = '#' * int(round(rec.current_uA))
        print(f"  {v:+6.2f} V  {rec.current_uA:9.4f} μA  {bar}")

    sweep = VoltageSweep(session, step_V=args.step, pause_s=0.0, on_step=on_step)
    result = sweep.run()
    print(f"\n  {result.status}: {result.message}")

    i = np.array(result.currents)
    v = np.array(result.voltages)
    if i.size and np.any(i > 0):
        onset = v[i > 0].min()
        print(f"  Current vanishes below {onset:+.2f} V "
              f"(V_s = {session.compute_physics().stopping_potential_V:.3f} V)")


def cmd_planck(args):
    """Measure each filter and fit Planck's constant."""
    session = _make_session(args)
    session.start()
    session.set_voltage(0.0)

    _header(f"PLANCK CONSTANT: {session.material.name}")
    for tag in args.filters:
        session.select_filter(tag)
        rec = session.take_measurement()
        print(f"  {tag:8s} {rec.wavelength_nm:5g} nm  V_s = {rec.stopping_potential_V:.3f} V  "
              f"I = {rec.current_uA:.3f} μA")

    print()
    print(f"  {session.regression.describe()}")
    if session.regression.is_available:
        print(f"  SI value: {session.regression.planck_constant_Js:.4e} J·s")


def cmd_export(args):
    """Run a demonstration data set and export it to CSV."""
    from lab.sweep import VoltageSweep

    session = _make_session(args)
    session.start()
    for tag in args.filters:
        session.select_filter(tag)
        VoltageSweep(session, pause_s=0.0).run()

    result = session.export_csv(args.output)
    _header("CSV EXPORT")
    print(f"  {result.status}: {result.message}")
    if result.path:
        print(f"  File: {result.path}")


def cmd_presets(args):
    """List or inspect available presets."""
    from lab.config import ExperimentConfig

    if args.name:
        _header(f"PRESET: {args.name}")
        cfg = ExperimentConfig.from_preset(args.name)
        for k, v in cfg.to_dict().items():
            print(f"  {k:28s}  {v}")
    else:
        _header("PRESETS")
        for name in ExperimentConfig.list_presets():
            cfg = ExperimentConfig.from_preset(name)
            print(f"  {name:20s}  {cfg.description}")


# ── parser ───────────────────────────────────────────────────────────────

def build_parser():
    p = argparse.ArgumentParser(
        prog='photoelectric-lab',
        description='Photoelectric Effect Laboratory Simulator CLI')
    p.add_argument('--preset', help='Configuration preset')
    p.add_argument('--seed', type=int, help='Random seed')
    p.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    sub = p.add_subparsers(dest='command', help='command')

    sub.add_parser('materials', help='List photocathode materials')
    sub.add_parser('filters', help='List standard filters')

    ph = sub.add_parser('physics', help='Show photoelectric quantities')
    _add_bench_args(ph)

    m = sub.add_parser('measure', help='Take one precision measurement')
    _add_bench_args(m)

    sw = sub.add_parser('sweep', help='Automatic I-V sweep')
    _add_bench_args(sw, voltage=False)
    sw.add_argument('--step', type=float, help='Voltage step (V)')

    pl = sub.add_parser('planck', help='Fit Planck constant over filters')
    pl.add_argument('-m', '--material', default='Cs', help='Material name or symbol')
    pl.add_argument('filters', nargs='*', default=['blue', 'green', 'yellow', 'orange'])

    ex = sub.add_parser('export', help='Sweep each filter and export CSV')
    ex.add_argument('-m', '--material', default='Cs', help='Material name or symbol')
    ex.add_argument('filters', nargs='*', default=['blue', 'green', 'yellow'])
    ex.add_argument('-o', '--output', help='Output file or directory')

    ps = sub.add_parser('presets', help='List/inspect presets')
    ps.add_argument('name', nargs='?', help='Preset to inspect')

    return p


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    commands = {
        'materials': cmd_materials,
        'filters':   cmd_filters,
        'physics':   cmd_physics,
        'measure':   cmd_measure,
        'sweep':     cmd_sweep,
        'planck':    cmd_planck,
        'export':    cmd_export,
        'presets':   cmd_presets,
    }

    if args.command in commands:
        try:
            commands[args.command](args)
        except (KeyError, ValueError, FileNotFoundError) as e:
            print(f"  error: {e}", file=sys.stderr)
            return 1
    else:
        parser.print_help()
    return 0


if __name__ == '__main__':
    sys.exit(main())
