"""Gewichtsbilder: lesender Zugriff auf Graustufen-Intensitäten pro Layer."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class WeightImage(Protocol):
    """Extern verwaltetes Graustufenbild, das nur gelesen wird."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    def intensity(self, x: int, y: int) -> float: ...


class ArrayWeightImage:
    """WeightImage auf Basis eines ``(height, width)``-Arrays.

    Zeile 0 ist die unterste Bildzeile (Ursprung unten links). Zugriffe
    außerhalb des Bildes werden auf den nächsten Randpixel geklemmt.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels) -> None:
        array = np.array(pixels, dtype=np.float64)
        if array.ndim != 2 or array.size == 0:
            raise ValueError(f"Gewichtsbild braucht ein nicht-leeres 2D-Array, erhalten: {array.shape}")
        array.setflags(write=False)
        self._pixels = array

    @classmethod
    def constant(cls, width: int, height: int, value: float) -> ArrayWeightImage:
        return cls(np.full((height, width), float(value), dtype=np.float64))

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels

    def intensity(self, x: int, y: int) -> float:
        column = min(max(int(x), 0), self.width - 1)
        row = min(max(int(y), 0), self.height - 1)
        return float(self._pixels[row, column])

    def sample(self, columns: np.ndarray, rows: np.ndarray) -> np.ndarray:
        """Liest ein ganzes Raster auf einmal, mit derselben Randklemmung wie ``intensity``."""
        columns = np.clip(columns, 0, self.width - 1)
        rows = np.clip(rows, 0, self.height - 1)
        return self._pixels[np.ix_(rows, columns)]

    def __repr__(self) -> str:
        return f"ArrayWeightImage({self.width}x{self.height})"
