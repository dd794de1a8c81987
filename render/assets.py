"""
Tile asset resolution.

Each tile type maps to one asset file named after the type, e.g.
``assets/tiles/forest.png``. Resolution failures surface as UnresolvedAsset so
the canvas can draw a fallback; they never touch placement state.
"""
import logging
from pathlib import Path
from typing import Dict, Union

from core.types import TileType, UnresolvedAsset

logger = logging.getLogger(__name__)


class TileAssetResolver:
    """Maps tile types to asset files by naming convention."""

    def __init__(self, asset_dir: Union[str, Path] = "assets/tiles", suffix: str = ".png"):
        self.asset_dir = Path(asset_dir)
        self.suffix = suffix
        self._resolved: Dict[TileType, Path] = {}

    def path_for(self, tile_type: TileType) -> Path:
        """Asset path for a tile type (deterministic, no existence check)."""
        return self.asset_dir / f"{tile_type}{self.suffix}"

    def resolve(self, tile_type: TileType) -> Path:
        """
        Find the asset file for a tile type.

        Raises:
            UnresolvedAsset: If no file exists for the type
        """
        if tile_type in self._resolved:
            return self._resolved[tile_type]

        path = self.path_for(tile_type)
        if not tile_type or not path.is_file():
            raise UnresolvedAsset(tile_type, path)

        logger.debug("Resolved asset for %s: %s", tile_type, path)
        self._resolved[tile_type] = path
        return path

    def has_asset(self, tile_type: TileType) -> bool:
        try:
            self.resolve(tile_type)
        except UnresolvedAsset:
            return False
        return True
