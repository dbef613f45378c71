"""Gemeinsamer Lesepfad für Validator und Normalizer.

Beide Komponenten lesen ihre Intensitäten ausschließlich über diese Funktionen,
damit Zeilen-Remapping und Graustufenreduktion identisch bleiben.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from splat_profile.models.splat import LayerDefinition
from splat_profile.models.weight_image import ArrayWeightImage, WeightImage


def flip_row(z: int, height: int) -> int:
    """Bildet eine Ausgabezeile auf die Quellzeile des Gewichtsbildes ab."""
    return height - 1 - z


def sample_image(image: WeightImage, width: int, height: int) -> np.ndarray:
    """Liefert ``grid[z, x] = image.intensity(x, flip_row(z))`` für das gesamte Raster."""
    rows = np.array([flip_row(z, height) for z in range(height)], dtype=np.intp)
    columns = np.arange(width, dtype=np.intp)
    if isinstance(image, ArrayWeightImage):
        return image.sample(columns, rows).astype(np.float64, copy=False)
    grid = np.empty((height, width), dtype=np.float64)
    for z, source_row in enumerate(rows):
        for x in range(width):
            grid[z, x] = image.intensity(x, int(source_row))
    return grid


def sample_layers(layers: Sequence[LayerDefinition], width: int, height: int) -> np.ndarray:
    """Stapelt alle Layer zu einem ``(height, width, layer_count)``-Array.

    Setzt voraus, dass jeder Layer ein Gewichtsbild besitzt.
    """
    stack = np.empty((height, width, len(layers)), dtype=np.float64)
    for index, layer in enumerate(layers):
        stack[:, :, index] = sample_image(layer.weight_image, width, height)
    return stack
