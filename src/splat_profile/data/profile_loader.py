"""Lädt Splatmap-Profile aus JSON-Dateien."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from splat_profile.data.image_loader import load_weight_image
from splat_profile.models.splat import (
    TEXTURE_TYPE_DEFAULT,
    TEXTURE_TYPE_NORMAL_MAP,
    LayerDefinition,
    MaterialParams,
    TextureAsset,
)

LOGGER = logging.getLogger(__name__)


@dataclass(slots=True)
class ProfileDocument:
    """Inhalt einer Profildatei: Layer und optionale Rastergröße des Ziels."""

    source: Path
    layers: List[LayerDefinition]
    target_size: Optional[Tuple[int, int]] = None
    notes: List[str] = field(default_factory=list)


class ProfileLoader:
    """Liest Layer-Definitionen; relative Pfade beziehen sich auf die Profildatei."""

    def __init__(self, source: Path) -> None:
        self.source = Path(source)
        self.base_dir = self.source.resolve().parent

    def load(self) -> ProfileDocument:
        if not self.source.exists():
            raise FileNotFoundError(f"Profil nicht gefunden: {self.source}")
        try:
            payload = json.loads(self.source.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ValueError(f"Profil {self.source} ist kein gültiges JSON: {exc}") from exc
        if not isinstance(payload, dict):
            raise ValueError(f"Profil {self.source} muss ein JSON-Objekt sein")
        entries = payload.get("layers", [])
        if not isinstance(entries, list):
            raise ValueError("'layers' muss eine Liste sein")
        document = ProfileDocument(
            source=self.source,
            layers=[],
            target_size=self._parse_target(payload.get("target")),
        )
        for index, entry in enumerate(entries):
            if not isinstance(entry, dict):
                raise ValueError(f"Layer {index} muss ein JSON-Objekt sein")
            document.layers.append(self._parse_layer(entry, index, document.notes))
        return document

    # ---------------------------------------------------------------------------------- intern

    def _parse_target(self, target: object) -> Optional[Tuple[int, int]]:
        if target is None:
            return None
        if not isinstance(target, dict):
            raise ValueError("'target' muss ein JSON-Objekt sein")
        try:
            width = int(target["width"])
            height = int(target["height"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"'target' braucht ganzzahlige width/height: {exc}") from exc
        if width <= 0 or height <= 0:
            raise ValueError(f"Ungültige Rastergröße im Profil: {width}x{height}")
        return width, height

    def _parse_layer(self, entry: Dict[str, object], index: int, notes: List[str]) -> LayerDefinition:
        weight_image = None
        readable = bool(entry.get("readable", True))
        image_ref = entry.get("weight_image")
        if image_ref:
            image_path = self._resolve(str(image_ref))
            try:
                weight_image = load_weight_image(image_path)
            except FileNotFoundError as exc:
                LOGGER.warning("Layer %s: %s", index, exc)
                notes.append(f"Layer {index}: Gewichtsbild fehlt ({image_path})")
        material = MaterialParams(
            albedo=self._parse_texture(entry.get("albedo"), TEXTURE_TYPE_DEFAULT),
            normal_map=self._parse_texture(entry.get("normal_map"), TEXTURE_TYPE_NORMAL_MAP),
            tile_size=self._parse_pair(entry.get("tile_size"), (15.0, 15.0), "tile_size"),
            tile_offset=self._parse_pair(entry.get("tile_offset"), (0.0, 0.0), "tile_offset"),
            metallic=float(entry.get("metallic", 0.0)),
            smoothness=float(entry.get("smoothness", 0.0)),
        )
        return LayerDefinition(
            weight_image=weight_image,
            readable=readable,
            material=material,
            name=str(entry.get("name", "")),
        )

    def _parse_texture(self, value: object, default_type: str) -> Optional[TextureAsset]:
        if not value:
            return None
        if isinstance(value, str):
            return TextureAsset(path=self._resolve(value), texture_type=default_type)
        if not isinstance(value, dict) or not value.get("path"):
            raise ValueError(f"Texturangabe braucht einen 'path': {value!r}")
        return TextureAsset(
            path=self._resolve(str(value["path"])),
            texture_type=str(value.get("texture_type", default_type)),
            readable=bool(value.get("readable", True)),
        )

    @staticmethod
    def _parse_pair(value: object, default: Tuple[float, float], name: str) -> Tuple[float, float]:
        if value is None:
            return default
        if not isinstance(value, (list, tuple)) or len(value) != 2:
            raise ValueError(f"'{name}' muss zwei Zahlen enthalten, erhalten: {value!r}")
        return float(value[0]), float(value[1])

    def _resolve(self, reference: str) -> Path:
        path = Path(reference)
        if not path.is_absolute():
            path = self.base_dir / path
        return path
