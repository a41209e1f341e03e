# materials/__init__.py
"""
Reference tables for the Photoelectric Effect Laboratory Simulator.

Usage:
    from materials import get_material, get_filter, CESIUM

    cs = get_material('Cs')
    print(cs.work_function_eV)          # 2.10 eV

    blue = get_filter('blue')
    print(blue.photon_energy_eV)        # 2.833 eV
"""

from .photocathodes import (
    PhotocathodeMaterial,
    get_material,
    list_materials,
    CESIUM,
    SODIUM,
    POTASSIUM,
    ALUMINUM,
    COPPER,
    SILVER,
    GOLD,
    MATERIALS_DATABASE,
)
from .filters import (
    StandardFilter,
    get_filter,
    list_filters,
    FILTER_DATABASE,
)
from .reference_data import DEFAULT_FILTER, DEFAULT_MATERIAL

__all__ = [
    'PhotocathodeMaterial',
    'get_material',
    'list_materials',
    'CESIUM',
    'SODIUM',
    'POTASSIUM',
    'ALUMINUM',
    'COPPER',
    'SILVER',
    'GOLD',
    'MATERIALS_DATABASE',
    'StandardFilter',
    'get_filter',
    'list_filters',
    'FILTER_DATABASE',
    'DEFAULT_FILTER',
    'DEFAULT_MATERIAL',
]
