"""
Editor configuration.

All geometry constants live here so the grid-marker spacing and the placed
tile spacing can be tuned independently.
"""
import json
import logging
from dataclasses import asdict, dataclass, field, fields
from typing import Any, Dict, Tuple

from core.types import InvalidArgument, TileType

logger = logging.getLogger(__name__)

DEFAULT_TILE_TYPES: Tuple[TileType, ...] = ("forest", "rock", "sand", "water")


@dataclass
class EditorConfig:
    """
    Settings for an editing session.

    Attributes:
        radius: Grid radius (number of rings around the origin cell)
        tile_spacing: Cell size used to position placed tiles
        marker_spacing: Cell size used to position the clickable grid markers
        ground_offset: Height of placed tiles above the ground plane
        tile_types: Catalog of selectable tile types
        default_type: Type selected when the session starts
        asset_dir: Directory holding one asset file per tile type
        asset_suffix: File suffix of tile assets
        pixel_scale: Canvas pixels per plane unit
    """
    radius: int = 4
    tile_spacing: float = 1.0
    marker_spacing: float = 1.1
    ground_offset: float = 0.0
    tile_types: Tuple[TileType, ...] = field(default_factory=lambda: DEFAULT_TILE_TYPES)
    default_type: TileType = "forest"
    asset_dir: str = "assets/tiles"
    asset_suffix: str = ".png"
    pixel_scale: float = 30.0

    def __post_init__(self):
        if isinstance(self.tile_types, (list, tuple)):
            self.tile_types = tuple(self.tile_types)

    def validate(self) -> "EditorConfig":
        """
        Check value ranges.

        Returns:
            self, for chaining

        Raises:
            InvalidArgument: On the first invalid setting
        """
        if isinstance(self.radius, bool) or not isinstance(self.radius, int) or self.radius < 0:
            raise InvalidArgument(f"radius must be a non-negative integer: {self.radius!r}")
        for name in ("tile_spacing", "marker_spacing", "pixel_scale", "ground_offset"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidArgument(f"{name} must be a number: {value!r}")
            if name != "ground_offset" and value <= 0:
                raise InvalidArgument(f"{name} must be positive: {value}")
        if not isinstance(self.tile_types, tuple):
            raise InvalidArgument(f"tile_types must be a list of strings: {self.tile_types!r}")
        if not self.tile_types:
            raise InvalidArgument("tile_types must not be empty")
        if any(not isinstance(t, str) or not t for t in self.tile_types):
            raise InvalidArgument(f"tile types must be non-empty strings: {self.tile_types}")
        if self.default_type not in self.tile_types:
            raise InvalidArgument(
                f"default_type '{self.default_type}' is not one of {list(self.tile_types)}")
        for name in ("asset_dir", "asset_suffix"):
            if not isinstance(getattr(self, name), str):
                raise InvalidArgument(f"{name} must be a string: {getattr(self, name)!r}")
        return self

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "EditorConfig":
        """Build a validated config from a dict; unknown keys are ignored."""
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            logger.warning("Ignoring unknown config keys: %s", ", ".join(unknown))
        return cls(**{k: v for k, v in data.items() if k in known}).validate()

    @classmethod
    def from_json(cls, path: str) -> "EditorConfig":
        """Load a config file (a JSON object of overrides)."""
        with open(path, "r") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise InvalidArgument(f"Config file {path} must contain a JSON object")
        logger.info("Loaded editor config from %s", path)
        return cls.from_dict(data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["tile_types"] = list(self.tile_types)
        return data
