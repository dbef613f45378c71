"""Command line entry point for splat-profile."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from splat_profile.data import FileTerrainStore, ProfileLoader
from splat_profile.models.splat import Diagnostic
from splat_profile.services.profile import SplatmapProfile
from splat_profile.terrain import InMemoryTerrainStore

LOGGER = logging.getLogger("splat_profile")


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Normalisiert Layer-Gewichtsbilder zu einer Terrain-Splatmap")
    parser.add_argument("--profile", type=Path, required=True, help="Pfad zur JSON-Profildatei")
    parser.add_argument("--width", type=int, default=None, help="Breite des Gewichtsrasters (überschreibt das Profil)")
    parser.add_argument("--height", type=int, default=None, help="Höhe des Gewichtsrasters (überschreibt das Profil)")
    parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Zielverzeichnis für layers.json, weights.npy und Splatmap-PNGs",
    )
    parser.add_argument(
        "--check-only",
        action="store_true",
        help="Nur prüfen, nichts normalisieren oder exportieren",
    )
    parser.add_argument("--verbose", action="store_true", help="Debug-Ausgaben aktivieren")
    args = parser.parse_args(argv)
    if (args.width is None) != (args.height is None):
        parser.error("--width und --height müssen gemeinsam angegeben werden")
    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
    )

    document = ProfileLoader(args.profile).load()
    size = (args.width, args.height) if args.width is not None else document.target_size
    target = None
    if size:
        width, height = size
        target = FileTerrainStore(args.output, width, height) if args.output else InMemoryTerrainStore(width, height)
    profile = SplatmapProfile(target=target, layers=document.layers)

    diagnostics = profile.can_apply()
    payload: Dict[str, Any] = {
        "profile": str(document.source),
        "layer_count": len(profile.layers),
        "size": list(size) if size else None,
        "diagnostics": _serialize_diagnostics(diagnostics),
        "import_warnings": _serialize_diagnostics(profile.import_warnings()),
        "notes": document.notes,
        "applied": False,
        "exported": [],
    }
    if diagnostics:
        for diagnostic in diagnostics:
            LOGGER.error(diagnostic.message)
    elif not args.check_only:
        LOGGER.info("Starte Normalisierung...")
        profile.apply()
        payload["applied"] = True
        if isinstance(target, FileTerrainStore):
            payload["exported"] = [str(path) for path in target.flush()]
        LOGGER.info("Splatmap abgeschlossen.")
    print(json.dumps(payload, indent=2, ensure_ascii=False))
    return 1 if diagnostics else 0


def _serialize_diagnostics(diagnostics: List[Diagnostic]) -> List[Dict[str, object]]:
    return [diagnostic.to_dict() for diagnostic in diagnostics]


if __name__ == "__main__":
    raise SystemExit(main())
