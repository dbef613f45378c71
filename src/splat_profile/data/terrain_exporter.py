"""Terrain-Store, der Layer und Gewichte als Dateien exportiert."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from PIL import Image

LOGGER = logging.getLogger(__name__)

CHANNELS_PER_SPLATMAP = 4


class FileTerrainStore:
    """Sammelt Prototypen und Gewichte und schreibt sie bei ``flush`` ins Exportverzeichnis.

    Ausgabe: ``layers.json``, ``weights.npy`` (``[z][x][layer]``) sowie RGBA-Splatmaps
    mit je vier Layern (``splatmap_0.png``, ``splatmap_1.png``, ...).
    """

    def __init__(self, export_root: Path, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Ungültige Rastergröße: {width}x{height}")
        self.export_root = Path(export_root)
        self.export_root.mkdir(parents=True, exist_ok=True)
        self._width = width
        self._height = height
        self._prototypes: List[Dict[str, object]] = []
        self._weights: Optional[np.ndarray] = None

    @property
    def weight_width(self) -> int:
        return self._width

    @property
    def weight_height(self) -> int:
        return self._height

    def set_layer_prototypes(self, prototypes: List[Dict[str, object]]) -> None:
        self._prototypes = list(prototypes)

    def set_weights(self, x_offset: int, y_offset: int, weights: np.ndarray) -> None:
        height, width, layer_count = weights.shape
        if self._weights is None or self._weights.shape[2] != layer_count:
            self._weights = np.zeros((self._height, self._width, layer_count), dtype=np.float32)
        self._weights[y_offset : y_offset + height, x_offset : x_offset + width, :] = weights

    def flush(self) -> List[Path]:
        """Schreibt alle Dateien und liefert ihre Pfade."""
        if self._weights is None:
            raise ValueError("Keine Gewichte gesetzt – nichts zu exportieren.")
        written: List[Path] = []

        manifest = {
            "generated_at": datetime.now(timezone.utc).isoformat(),
            "width": self._width,
            "height": self._height,
            "layers": self._prototypes,
        }
        manifest_path = self.export_root / "layers.json"
        manifest_path.write_text(json.dumps(manifest, indent=2, ensure_ascii=False), encoding="utf-8")
        written.append(manifest_path)

        weights_path = self.export_root / "weights.npy"
        np.save(weights_path, self._weights)
        written.append(weights_path)

        written.extend(self._write_splatmaps())
        LOGGER.info("Splatmap-Export nach %s (%s Dateien).", self.export_root, len(written))
        return written

    def _write_splatmaps(self) -> List[Path]:
        layer_count = self._weights.shape[2]
        paths: List[Path] = []
        for image_index, start in enumerate(range(0, layer_count, CHANNELS_PER_SPLATMAP)):
            rgba = np.zeros((self._height, self._width, CHANNELS_PER_SPLATMAP), dtype=np.uint8)
            chunk = self._weights[:, :, start : start + CHANNELS_PER_SPLATMAP]
            rgba[:, :, : chunk.shape[2]] = np.rint(np.clip(chunk, 0.0, 1.0) * 255.0).astype(np.uint8)
            destination = self.export_root / f"splatmap_{image_index}.png"
            Image.fromarray(rgba).save(destination)
            paths.append(destination)
        return paths
