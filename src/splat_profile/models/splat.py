"""Datenmodelle für Splatmap-Profile: Layer, Materialien, Diagnosen und Gewichtsfelder."""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

import numpy as np

from splat_profile.models.weight_image import WeightImage

TEXTURE_TYPE_DEFAULT = "default"
TEXTURE_TYPE_NORMAL_MAP = "normal_map"


@dataclass(slots=True)
class TextureAsset:
    """Referenz auf eine Textur inklusive ihrer Import-Metadaten."""

    path: Optional[Path] = None
    texture_type: str = TEXTURE_TYPE_DEFAULT
    readable: bool = True

    def to_dict(self) -> Dict[str, object]:
        return {
            "path": str(self.path) if self.path else None,
            "texture_type": self.texture_type,
            "readable": self.readable,
        }


@dataclass(slots=True)
class MaterialParams:
    """Materialbeschreibung eines Layers, wird unverändert an den Store durchgereicht."""

    albedo: Optional[TextureAsset] = None
    normal_map: Optional[TextureAsset] = None
    tile_size: Tuple[float, float] = (15.0, 15.0)
    tile_offset: Tuple[float, float] = (0.0, 0.0)
    metallic: float = 0.0
    smoothness: float = 0.0

    def to_dict(self) -> Dict[str, object]:
        return {
            "albedo": self.albedo.to_dict() if self.albedo else None,
            "normal_map": self.normal_map.to_dict() if self.normal_map else None,
            "tile_size": list(self.tile_size),
            "tile_offset": list(self.tile_offset),
            "metallic": self.metallic,
            "smoothness": self.smoothness,
        }


@dataclass(slots=True)
class LayerDefinition:
    """Ein Terrain-Layer: Gewichtsbild plus Material.

    Die Position in der Layer-Liste bestimmt Ausgabeindex und Stapelreihenfolge.
    """

    weight_image: Optional[WeightImage] = None
    readable: bool = True
    material: MaterialParams = field(default_factory=MaterialParams)
    name: str = ""


class DiagnosticCategory(str, Enum):
    MISSING_TARGET = "missing_target"
    MISSING_INPUT = "missing_input"
    UNREADABLE_ASSET = "unreadable_asset"
    COVERAGE_GAP = "coverage_gap"
    IMPORT_SETTINGS = "import_settings"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Meldung über ein Problem, das ein Anwenden des Profils verhindert oder betrifft."""

    category: DiagnosticCategory
    message: str
    layer_index: Optional[int] = None
    pixel: Optional[Tuple[int, int]] = None

    def to_dict(self) -> Dict[str, object]:
        payload = asdict(self)
        payload["category"] = self.category.value
        if self.pixel is not None:
            payload["pixel"] = list(self.pixel)
        return payload


class WeightField:
    """Normalisierte Layer-Gewichte, logisch indiziert als ``[z][x][layer]``."""

    __slots__ = ("_data",)

    def __init__(self, data: np.ndarray) -> None:
        if data.ndim != 3:
            raise ValueError(f"WeightField erwartet ein 3D-Array, erhalten: {data.shape}")
        data.setflags(write=False)
        self._data = data

    @property
    def data(self) -> np.ndarray:
        return self._data

    @property
    def height(self) -> int:
        return int(self._data.shape[0])

    @property
    def width(self) -> int:
        return int(self._data.shape[1])

    @property
    def layer_count(self) -> int:
        return int(self._data.shape[2])

    def __getitem__(self, row: int) -> np.ndarray:
        return self._data[row]

    def layer(self, index: int) -> np.ndarray:
        """Gewichte eines einzelnen Layers als ``(height, width)``-Array."""
        return self._data[:, :, index]

    def pixel_sums(self) -> np.ndarray:
        return self._data.sum(axis=2)

    def to_nested_lists(self) -> List[List[List[float]]]:
        return self._data.tolist()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, WeightField):
            return NotImplemented
        return self._data.dtype == other._data.dtype and np.array_equal(self._data, other._data)

    def __repr__(self) -> str:
        return f"WeightField({self.height}x{self.width}x{self.layer_count})"


LayerSet = Sequence[LayerDefinition]
