# utils/constants.py
"""
Physical Constants for the Photoelectric Effect Laboratory Simulator

Two sets of values live here:

    - LABORATORY constants, rounded exactly as printed in the laboratory
      manual. The physics engine uses these so the simulated numbers agree
      with the values students look up in the manual (h = 4.136e-15 eV·s).
    - CODATA 2018 values, used only for comparison and SI conversions.

Energies are in eV throughout; one electron moved through one volt gains
one eV, so kinetic energies in eV equal stopping potentials in V.

References:
    - CODATA 2018 recommended values
    - University laboratory manual, "The Photoelectric Effect"
"""


# =============================================================================
# LABORATORY CONSTANTS (manual values)
# =============================================================================

# Planck constant (eV·s)
H_EV_S = 4.136e-15
PLANCK_CONSTANT_EV = H_EV_S  # Alias

# Speed of light (m/s)
C = 3e8
C_LIGHT = C  # Alias

# Elementary charge (C)
Q = 1.602e-19
Q_ELECTRON = Q  # Alias

# =============================================================================
# CODATA 2018
# =============================================================================

H_CODATA_J_S = 6.62607015e-34
Q_CODATA = 1.602176634e-19
C_CODATA = 299792458.0
H_CODATA_EV_S = H_CODATA_J_S / Q_CODATA  # ≈ 4.1357e-15 eV·s

# =============================================================================
# DERIVED CONSTANTS
# =============================================================================

# h·c product for wavelength-energy conversion (eV·nm)
HC_EV_NM = H_EV_S * C * 1e9  # ≈ 1240.8 eV·nm

# Frequency display unit used by the laboratory tables
FREQUENCY_UNIT_HZ = 1e14

# =============================================================================
# UNIT CONVERSION HELPERS
# =============================================================================

def eV_to_J(eV):
    """Convert electron-volts to Joules."""
    return eV * Q

def J_to_eV(J):
    """Convert Joules to electron-volts."""
    return J / Q

def wavelength_to_frequency(wavelength_nm):
    """Convert wavelength (nm) to frequency (Hz): f = c / λ."""
    return C / (wavelength_nm * 1e-9)

def frequency_to_wavelength(frequency_Hz):
    """Convert frequency (Hz) to wavelength (nm)."""
    return C / frequency_Hz * 1e9

def photon_energy(frequency_Hz):
    """Photon energy (eV) from frequency: E = h·f."""
    return H_EV_S * frequency_Hz

def nm_to_eV(wavelength_nm):
    """Convert wavelength (nm) to photon energy (eV)."""
    return photon_energy(wavelength_to_frequency(wavelength_nm))


# =============================================================================
# WAVELENGTH → DISPLAY COLOUR
# =============================================================================

# Upper band edges (nm) and the colour shown for light below each edge
_SPECTRUM_BANDS = (
    (380, '#8B00FF'),
    (440, '#4B0082'),
    (490, '#0000FF'),
    (510, '#00FF00'),
    (580, '#FFFF00'),
    (645, '#FF7F00'),
    (750, '#FF0000'),
)


def wavelength_color(wavelength_nm):
    """
    Approximate display colour (hex) of monochromatic light.

    Returns dark red for anything at or beyond 750 nm.
    """
    for edge, color in _SPECTRUM_BANDS:
        if wavelength_nm < edge:
            return color
    return '#8B0000'


# =============================================================================
# SELF-TEST
# =============================================================================

if __name__ == "__main__":
    print("Laboratory Constants Module")
    print("=" * 50)
    print(f"Planck constant h:     {H_EV_S:.4e} eV·s (CODATA {H_CODATA_EV_S:.4e})")
    print(f"Speed of light c:      {C:.0f} m/s")
    print(f"Elementary charge e:   {Q:.4e} C")
    print(f"h·c factor:            {HC_EV_NM:.2f} eV·nm")
    print()
    print("Conversions:")
    for wl in (438, 565, 578, 598):
        f = wavelength_to_frequency(wl)
        print(f"  {wl} nm → {f/1e14:.3f}e14 Hz → {photon_energy(f):.3f} eV "
              f"({wavelength_color(wl)})")
