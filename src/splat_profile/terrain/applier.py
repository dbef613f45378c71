"""Schreibt Layer-Prototypen und Gewichte in einen Terrain-Datenspeicher."""

from __future__ import annotations

import logging
from typing import Dict, List, Optional, Protocol, Sequence

import numpy as np

from splat_profile.models.splat import LayerDefinition, MaterialParams, WeightField

LOGGER = logging.getLogger(__name__)


class TerrainStore(Protocol):
    """Externer Speicher mit Gewichtsraster, z. B. Terrain-Daten einer Engine."""

    @property
    def weight_width(self) -> int: ...

    @property
    def weight_height(self) -> int: ...

    def set_layer_prototypes(self, prototypes: List[Dict[str, object]]) -> None: ...

    def set_weights(self, x_offset: int, y_offset: int, weights: np.ndarray) -> None: ...


def to_layer_prototype(material: MaterialParams) -> Dict[str, object]:
    """Wandelt Materialparameter in das native Prototyp-Format des Stores um."""
    return {
        "albedo": str(material.albedo.path) if material.albedo and material.albedo.path else None,
        "normal_map": str(material.normal_map.path) if material.normal_map and material.normal_map.path else None,
        "tile_size": [float(value) for value in material.tile_size],
        "tile_offset": [float(value) for value in material.tile_offset],
        "metallic": float(material.metallic),
        "smoothness": float(material.smoothness),
    }


def apply_layers(layers: Sequence[LayerDefinition], weight_field: WeightField, store: TerrainStore) -> None:
    """Ersetzt Prototypen und Gewichte im Store in einem Aufruf.

    Prüft keine Diagnosen; der Aufrufer muss ``validate`` bereits erfolgreich ausgeführt haben.
    """
    if weight_field.layer_count != len(layers):
        raise ValueError(
            f"WeightField hat {weight_field.layer_count} Layer, erwartet werden {len(layers)}"
        )
    prototypes = [to_layer_prototype(layer.material) for layer in layers]
    store.set_layer_prototypes(prototypes)
    store.set_weights(0, 0, weight_field.data)
    LOGGER.info(
        "%s Layer mit %sx%s Gewichten geschrieben.",
        len(prototypes),
        weight_field.width,
        weight_field.height,
    )


class InMemoryTerrainStore:
    """Einfacher Store, der alles im Speicher hält."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Ungültige Rastergröße: {width}x{height}")
        self._width = width
        self._height = height
        self.prototypes: List[Dict[str, object]] = []
        self.weights: Optional[np.ndarray] = None
        self.write_count = 0

    @property
    def weight_width(self) -> int:
        return self._width

    @property
    def weight_height(self) -> int:
        return self._height

    def set_layer_prototypes(self, prototypes: List[Dict[str, object]]) -> None:
        self.prototypes = list(prototypes)

    def set_weights(self, x_offset: int, y_offset: int, weights: np.ndarray) -> None:
        height, width, layer_count = weights.shape
        if x_offset == 0 and y_offset == 0 and (width, height) == (self._width, self._height):
            self.weights = np.array(weights, copy=True)
        else:
            if self.weights is None or self.weights.shape[2] != layer_count:
                self.weights = np.zeros((self._height, self._width, layer_count), dtype=weights.dtype)
            self.weights[y_offset : y_offset + height, x_offset : x_offset + width, :] = weights
        self.write_count += 1

    def __repr__(self) -> str:
        return f"InMemoryTerrainStore({self._width}x{self._height})"
