"""Validierung, Normalisierung und Anwenden von Terrain-Gewichtsbildern."""

from .applier import InMemoryTerrainStore, TerrainStore, apply_layers, to_layer_prototype
from .import_settings import inspect_layer, inspect_layers
from .normalizer import normalize
from .validator import validate

__all__ = [
    "InMemoryTerrainStore",
    "TerrainStore",
    "apply_layers",
    "inspect_layer",
    "inspect_layers",
    "normalize",
    "to_layer_prototype",
    "validate",
]
