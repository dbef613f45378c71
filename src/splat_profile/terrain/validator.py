"""Vorbedingungen für die Normalisierung von Gewichtsbildern prüfen."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import numpy as np

from splat_profile.models.splat import Diagnostic, DiagnosticCategory, LayerDefinition
from splat_profile.terrain.sampling import flip_row, sample_layers

# (Layer-Index oder Pixel, Meldung)
CheckResult = Optional[Tuple[object, str]]


def first_layer_without_image(layers: Sequence[LayerDefinition]) -> CheckResult:
    for index, layer in enumerate(layers):
        if layer.weight_image is None:
            return index, f"Layer-Definition an Position {index} hat kein Gewichtsbild."
    return None


def first_unreadable_layer(layers: Sequence[LayerDefinition]) -> CheckResult:
    for index, layer in enumerate(layers):
        if not layer.readable:
            return index, f"Layer-Definition an Position {index} hat ein nicht lesbares Gewichtsbild."
    return None


def first_uncovered_pixel(layers: Sequence[LayerDefinition], width: int, height: int) -> CheckResult:
    """Sucht den ersten Pixel, dessen Gewichtssumme über alle Layer nicht positiv ist.

    Scanreihenfolge: Spalte ``x`` außen, Quellzeile ``y`` innen, jeweils aufsteigend.
    Gemeldet wird die Koordinate im Gewichtsbild.
    """
    if width <= 0 or height <= 0:
        return None
    totals = sample_layers(layers, width, height).sum(axis=2)
    # Zeile z des Rasters stammt aus Quellzeile flip_row(z); umkehren ergibt Quellreihenfolge.
    uncovered = ~(totals > 0.0)
    source_rows = [flip_row(y, height) for y in range(height)]
    uncovered_by_source = uncovered[source_rows, :]
    hits = np.argwhere(uncovered_by_source.T)
    if hits.size == 0:
        return None
    x, y = (int(value) for value in hits[0])
    message = (
        f"Alle Gewichtsbilder sind an Position ({x},{y}) vollständig transparent. "
        "Mindestens ein Gewichtsbild muss diese Position abdecken."
    )
    return (x, y), message


def validate(layers: Sequence[LayerDefinition], width: int, height: int) -> List[Diagnostic]:
    """Liefert alle Diagnosen; eine leere Liste erlaubt die Normalisierung."""
    if not layers:
        return [Diagnostic(DiagnosticCategory.MISSING_INPUT, "Keine Layer-Definitionen.")]

    missing = first_layer_without_image(layers)
    if missing:
        index, message = missing
        return [Diagnostic(DiagnosticCategory.MISSING_INPUT, message, layer_index=index)]

    unreadable = first_unreadable_layer(layers)
    if unreadable:
        index, message = unreadable
        return [Diagnostic(DiagnosticCategory.UNREADABLE_ASSET, message, layer_index=index)]

    gap = first_uncovered_pixel(layers, width, height)
    if gap:
        pixel, message = gap
        return [Diagnostic(DiagnosticCategory.COVERAGE_GAP, message, pixel=pixel)]
    return []
