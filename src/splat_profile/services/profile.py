"""Splatmap-Profil: Ziel-Store plus Layer-Liste, mit zwischengespeicherter Prüfung."""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence, Tuple

from splat_profile.models.splat import (
    Diagnostic,
    DiagnosticCategory,
    LayerDefinition,
    MaterialParams,
    TextureAsset,
    WeightField,
)
from splat_profile.models.weight_image import ArrayWeightImage
from splat_profile.terrain import TerrainStore, apply_layers, inspect_layers, normalize, validate

LOGGER = logging.getLogger(__name__)

# Werte aus den Standard-Textureinstellungen des Terrain-Editors
DEFAULT_TILE_SIZE = (15.0, 15.0)


class ProfileNotApplicableError(RuntimeError):
    """Das Profil hat Diagnosen und darf nicht angewendet werden."""

    def __init__(self, diagnostics: Sequence[Diagnostic]) -> None:
        self.diagnostics = list(diagnostics)
        summary = "; ".join(diagnostic.message for diagnostic in self.diagnostics)
        super().__init__(f"Profil kann nicht angewendet werden: {summary}")


def new_layer_definition() -> LayerDefinition:
    """Standard-Layer: weiße Textur, weißes Gewichtsbild (deckt alles ab)."""
    return LayerDefinition(
        weight_image=ArrayWeightImage.constant(1, 1, 1.0),
        readable=True,
        material=MaterialParams(albedo=TextureAsset(), tile_size=DEFAULT_TILE_SIZE),
    )


class SplatmapProfile:
    """Bündelt Layer-Definitionen und das Terrain-Ziel, auf das sie angewendet werden.

    ``can_apply`` ist teuer (voller Scan aller Gewichtsbilder) und wird deshalb
    anhand eines Versions-Tokens zwischengespeichert. Jede Mutation über die
    Methoden dieser Klasse erhöht die Version; wer Layer direkt verändert, muss
    ``mark_changed`` aufrufen.
    """

    def __init__(
        self,
        target: Optional[TerrainStore] = None,
        layers: Optional[Sequence[LayerDefinition]] = None,
    ) -> None:
        self._target = target
        self._layers: List[LayerDefinition] = list(layers or [])
        self._version = 0
        self._cached: Optional[Tuple[Tuple[object, ...], List[Diagnostic]]] = None

    @classmethod
    def create_default(cls, target: Optional[TerrainStore] = None) -> SplatmapProfile:
        return cls(target=target, layers=[new_layer_definition()])

    # Zustand ------------------------------------------------------------------------------

    @property
    def target(self) -> Optional[TerrainStore]:
        return self._target

    @property
    def layers(self) -> Tuple[LayerDefinition, ...]:
        return tuple(self._layers)

    @property
    def version(self) -> int:
        return self._version

    def set_target(self, target: Optional[TerrainStore]) -> None:
        self._target = target
        self.mark_changed()

    def add_layer(self, layer: Optional[LayerDefinition] = None) -> LayerDefinition:
        layer = layer or new_layer_definition()
        self._layers.append(layer)
        self.mark_changed()
        return layer

    def remove_layer(self, index: int) -> LayerDefinition:
        layer = self._layers.pop(index)
        self.mark_changed()
        return layer

    def replace_layer(self, index: int, layer: LayerDefinition) -> None:
        self._layers[index] = layer
        self.mark_changed()

    def move_layer(self, source: int, destination: int) -> None:
        layer = self._layers.pop(source)
        self._layers.insert(destination, layer)
        self.mark_changed()

    def mark_changed(self) -> None:
        self._version += 1

    # Prüfen & Anwenden --------------------------------------------------------------------

    def content_token(self) -> Tuple[object, ...]:
        if self._target is None:
            return (self._version, None)
        return (self._version, id(self._target), self._target.weight_width, self._target.weight_height)

    def can_apply(self) -> List[Diagnostic]:
        """Liefert die Gründe, warum ``apply`` nicht möglich ist (leer = anwendbar)."""
        token = self.content_token()
        if self._cached and self._cached[0] == token:
            LOGGER.debug("Prüfergebnis aus Cache (Version %s).", self._version)
            return list(self._cached[1])
        diagnostics = self._collect_diagnostics()
        self._cached = (token, diagnostics)
        return list(diagnostics)

    def import_warnings(self) -> List[Diagnostic]:
        return inspect_layers(self._layers)

    def apply(self) -> WeightField:
        diagnostics = self.can_apply()
        if diagnostics:
            raise ProfileNotApplicableError(diagnostics)
        target = self._target
        layers = self.layers
        LOGGER.info("Wende Profil mit %s Layern auf %r an.", len(layers), target)
        weight_field = normalize(layers, target.weight_width, target.weight_height)
        apply_layers(layers, weight_field, target)
        return weight_field

    def _collect_diagnostics(self) -> List[Diagnostic]:
        diagnostics: List[Diagnostic] = []
        if self._target is None:
            diagnostics.append(Diagnostic(DiagnosticCategory.MISSING_TARGET, "Kein Terrain-Ziel gesetzt."))
            # Ohne Ziel keine Rastergröße: ein leeres Raster überspringt die Abdeckungsprüfung.
            diagnostics.extend(validate(self._layers, 0, 0))
            return diagnostics
        diagnostics.extend(validate(self._layers, self._target.weight_width, self._target.weight_height))
        return diagnostics
