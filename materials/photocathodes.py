# materials/photocathodes.py
"""
Photocathode Materials Database for the Photoelectric Effect Simulator

Each material is an immutable record: the session selects one, the physics
engine reads its work function, nothing ever mutates it.

Supported Materials:
    - Cesium (Cs), Sodium (Na), Potassium (K): emit in the visible
    - Aluminum (Al), Copper (Cu), Silver (Ag), Gold (Au): UV only
"""

from dataclasses import dataclass
from typing import Dict, List

from .reference_data import PHOTOCATHODES


# =============================================================================
# MATERIAL DATA CLASS
# =============================================================================

@dataclass(frozen=True)
class PhotocathodeMaterial:
    """Photocathode surface characterised by its work function."""

    name: str
    symbol: str
    work_function_eV: float
    color: str = '#CCCCCC'

    def __post_init__(self):
        if self.work_function_eV < 0:
            raise ValueError(
                f"Work function of {self.name} must be >= 0 eV, "
                f"got {self.work_function_eV}")

    def __str__(self) -> str:
        return f"{self.name} ({self.symbol}, φ = {self.work_function_eV:.2f} eV)"


# =============================================================================
# DATABASE
# =============================================================================

MATERIALS_DATABASE: Dict[str, PhotocathodeMaterial] = {
    symbol: PhotocathodeMaterial(
        name=props['name'],
        symbol=symbol,
        work_function_eV=props['work_function_eV'],
        color=props['color'],
    )
    for symbol, props in PHOTOCATHODES.items()
}

CESIUM = MATERIALS_DATABASE['Cs']
SODIUM = MATERIALS_DATABASE['Na']
POTASSIUM = MATERIALS_DATABASE['K']
ALUMINUM = MATERIALS_DATABASE['Al']
COPPER = MATERIALS_DATABASE['Cu']
SILVER = MATERIALS_DATABASE['Ag']
GOLD = MATERIALS_DATABASE['Au']


def get_material(name: str) -> PhotocathodeMaterial:
    """
    Get material by chemical symbol or full name (case-insensitive).

    Args:
        name: 'Cs', 'cesium', 'Gold', ...

    Returns:
        PhotocathodeMaterial

    Raises:
        KeyError: If material not found
    """
    key = name.strip().lower()
    for symbol, mat in MATERIALS_DATABASE.items():
        if key in (symbol.lower(), mat.name.lower()):
            return mat

    available = list_materials()
    raise KeyError(f"Material '{name}' not found. Available: {available}")


def list_materials() -> List[str]:
    """Return list of available material names, table order."""
    return [mat.name for mat in MATERIALS_DATABASE.values()]


# =============================================================================
# SELF-TEST
# =============================================================================

if __name__ == "__main__":
    print("=" * 60)
    print("PHOTOCATHODE MATERIALS DATABASE")
    print("=" * 60)
    for mat in MATERIALS_DATABASE.values():
        print(f"  {str(mat):35s}  colour={mat.color}")
