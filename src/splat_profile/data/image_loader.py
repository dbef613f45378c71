"""Lädt Gewichtsbilder von der Festplatte über Pillow."""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
from PIL import Image

from splat_profile.models.weight_image import ArrayWeightImage

LOGGER = logging.getLogger(__name__)

LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def to_intensity(pixels: np.ndarray) -> np.ndarray:
    """Reduziert ein Bildarray auf Graustufen in [0, 1]."""
    array = np.asarray(pixels)
    if np.issubdtype(array.dtype, np.integer):
        scale = float(np.iinfo(array.dtype).max)
        values = array.astype(np.float64) / scale
    else:
        values = array.astype(np.float64)
    if values.ndim == 3:
        if values.shape[2] >= 3:
            values = values[:, :, :3] @ LUMA_WEIGHTS
        else:
            # Graustufe mit Alpha: nur der Grauwert zählt
            values = values[:, :, 0]
    return np.clip(values, 0.0, 1.0)


def load_weight_image(path: Path) -> ArrayWeightImage:
    """Liest ein Bild und liefert es mit Ursprung unten links."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Gewichtsbild nicht gefunden: {path}")
    with Image.open(path) as image:
        if image.mode in {"P", "CMYK", "YCbCr", "LAB", "HSV"}:
            image = image.convert("RGBA" if "transparency" in image.info else "RGB")
        pixels = np.array(image)
    intensities = to_intensity(pixels)
    LOGGER.debug("Gewichtsbild %s geladen (%sx%s).", path, intensities.shape[1], intensities.shape[0])
    return ArrayWeightImage(intensities[::-1, :])
