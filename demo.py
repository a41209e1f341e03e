#!/usr/bin/env python3
# demo.py
"""
Photoelectric Effect Laboratory Simulator - Demonstration Script

Runs a complete Cesium experiment: every standard filter is measured at
zero bias, one automatic I-V sweep is taken under blue light, and the
Planck constant is fitted from the frequency vs stopping-potential data.

Run this script to verify the installation and see the bench in action.
"""

import numpy as np
import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))


def main():
    print("=" * 70)
    print("  PHOTOELECTRIC EFFECT LABORATORY SIMULATOR")
    print("  Cesium Photocathode Demonstration")
    print("=" * 70)

    # =========================================================================
    # 1. REFERENCE TABLES
    # =========================================================================
    print("\n" + "─" * 70)
    print("1️⃣  REFERENCE TABLES")
    print("─" * 70)

    from materials import MATERIALS_DATABASE, FILTER_DATABASE
    from physics import threshold_wavelength

    print("\nPhotocathode materials:")
    for mat in MATERIALS_DATABASE.values():
        print(f"  {mat.name:10} φ={mat.work_function_eV:.2f}eV  "
              f"λ0={threshold_wavelength(mat.work_function_eV):.0f}nm")

    print("\nMercury lines behind the standard filters:")
    for f in FILTER_DATABASE.values():
        print(f"  {f.tag:8} λ={f.wavelength_nm:.0f}nm  ν={f.frequency_e14:.3f}×10¹⁴Hz  "
              f"E={f.photon_energy_eV:.3f}eV")

    # =========================================================================
    # 2. BENCH SETUP
    # =========================================================================
    print("\n" + "─" * 70)
    print("2️⃣  BENCH SETUP")
    print("─" * 70)

    from lab import ExperimentConfig, ExperimentSession, VoltageSweep

    cfg = ExperimentConfig(seed=2024, sweep_pause_s=0.0)
    session = ExperimentSession(cfg)
    session.select_material('Cs')
    session.start()
    print(f"\n  {cfg}")
    print(f"  Lamp active: {session.is_active}")

    # =========================================================================
    # 3. STOPPING POTENTIAL PER FILTER
    # =========================================================================
    print("\n" + "─" * 70)
    print("3️⃣  ZERO-BIAS MEASUREMENT PER FILTER")
    print("─" * 70 + "\n")

    session.set_voltage(0.0)
    for tag in ['blue', 'green', 'yellow', 'orange']:
        session.select_filter(tag)
        p = session.compute_physics()
        rec = session.take_measurement()
        flag = '✓ emission' if p.is_emission else '✗ below threshold'
        print(f"  {tag:8} E={p.photon_energy_eV:.3f}eV  KE={p.max_kinetic_energy_eV:.3f}eV  "
              f"V_s={p.stopping_potential_V:.3f}V  I={rec.current_uA:7.3f}μA  {flag}")

    # =========================================================================
    # 4. AUTOMATIC I-V SWEEP
    # =========================================================================
    print("\n" + "─" * 70)
    print("4️⃣  AUTOMATIC I-V SWEEP (blue)")
    print("─" * 70 + "\n")

    session.select_filter('blue')
    result = VoltageSweep(session).run()
    v = np.array(result.voltages)
    i = np.array(result.currents)
    for vv, ii in zip(v[::3], i[::3]):
        print(f"  {vv:+5.1f}V  {ii:8.4f}μA  {'█' * int(round(ii))}")
    print(f"\n  {result.status}: {result.message} in {result.duration_s*1e3:.1f} ms")
    print(f"  Last non-zero current at {v[i > 0].min():+.1f} V "
          f"(V_s = {session.compute_physics().stopping_potential_V:.3f} V)")

    # =========================================================================
    # 5. PLANCK CONSTANT
    # =========================================================================
    print("\n" + "─" * 70)
    print("5️⃣  PLANCK CONSTANT FROM THE MILLIKAN PLOT")
    print("─" * 70 + "\n")

    for pt in session.frequency_data:
        print(f"  {pt.filter_tag:8} ν={pt.frequency_e14:.3f}×10¹⁴Hz  V_s={pt.stopping_potential_V:.3f}V")
    fit = session.regression
    print(f"\n  {fit.describe()}")
    if fit.is_available:
        print(f"  h = {fit.planck_constant_Js:.4e} J·s   r² = {fit.r_squared:.6f}")

    # =========================================================================
    # 6. EXPERIMENT LOG
    # =========================================================================
    print("\n" + "─" * 70)
    print("6️⃣  EXPERIMENT LOG (last 5)")
    print("─" * 70 + "\n")

    for entry in session.experiment_log[-5:]:
        print(f"  {entry}")

    print("\n" + "=" * 70)
    print("  ✅ DEMONSTRATION COMPLETE")
    print("=" * 70 + "\n")


if __name__ == "__main__":
    main()
