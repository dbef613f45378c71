"""Splatmap-Profil Datenmodule."""

from .image_loader import load_weight_image
from .profile_loader import ProfileDocument, ProfileLoader
from .terrain_exporter import FileTerrainStore

__all__ = ["FileTerrainStore", "ProfileDocument", "ProfileLoader", "load_weight_image"]
