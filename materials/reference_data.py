# =============================================================================
# REFERENCE DATA: Photocathode Materials & Laboratory Filters
# =============================================================================
# Sources:
#   - University laboratory manual, "The Photoelectric Effect"
#     (mercury-lamp filter set, rounded frequencies and energies)
#   - CRC Handbook of Chemistry and Physics, "Electron Work Function
#     of the Elements" (polycrystalline values)
#   - H.B. Michaelson, J. Appl. Phys. 48, 4729 (1977)
#
# This file is the SINGLE SOURCE OF TRUTH for the static tables the
# simulator consumes. Nothing here is computed: the filter frequencies and
# energies are the manual's printed values, not h·c/λ recomputed.
# =============================================================================

from typing import Dict

# =============================================================================
# PHOTOCATHODE MATERIALS
# =============================================================================
# Work function φ in eV. Ordered from the most to the least photosensitive.

PHOTOCATHODES: Dict[str, dict] = {}

# ---- Alkali metals: emit under visible light ----
PHOTOCATHODES['Cs'] = {
    'name': 'Cesium',
    'work_function_eV': 2.10,
    'color': '#FF6B6B',
}

PHOTOCATHODES['Na'] = {
    'name': 'Sodium',
    'work_function_eV': 2.28,
    'color': '#4ECDC4',
}

PHOTOCATHODES['K'] = {
    'name': 'Potassium',
    'work_function_eV': 2.30,
    'color': '#45B7D1',
}

# ---- Common metals: need ultraviolet ----
PHOTOCATHODES['Al'] = {
    'name': 'Aluminum',
    'work_function_eV': 4.08,
    'color': '#96CEB4',
}

PHOTOCATHODES['Cu'] = {
    'name': 'Copper',
    'work_function_eV': 4.70,
    'color': '#FFEAA7',
}

PHOTOCATHODES['Ag'] = {
    'name': 'Silver',
    'work_function_eV': 4.73,
    'color': '#DDA0DD',
}

PHOTOCATHODES['Au'] = {
    'name': 'Gold',
    'work_function_eV': 5.10,
    'color': '#FFD700',
}


# =============================================================================
# STANDARD FILTERS (mercury lamp lines selected by interference filters)
# =============================================================================

FILTERS: Dict[str, dict] = {
    'blue': {
        'wavelength_nm': 438,
        'frequency_Hz': 6.849e14,
        'photon_energy_eV': 2.833,
        'color': '#4169E1',
    },
    'green': {
        'wavelength_nm': 565,
        'frequency_Hz': 5.310e14,
        'photon_energy_eV': 2.196,
        'color': '#00FF00',
    },
    'yellow': {
        'wavelength_nm': 578,
        'frequency_Hz': 5.190e14,
        'photon_energy_eV': 2.147,
        'color': '#FFFF00',
    },
    'orange': {
        'wavelength_nm': 598,
        'frequency_Hz': 5.017e14,
        'photon_energy_eV': 2.075,
        'color': '#FFA500',
    },
}

# Filter selected when a session starts
DEFAULT_FILTER = 'blue'

# Material selected when a session starts
DEFAULT_MATERIAL = 'Cs'
