"""Tunable parameters for BSP layout generation."""

from __future__ import annotations

from dataclasses import dataclass

from delve import config


@dataclass(frozen=True)
class PartitionSettings:
    """Bundle of every knob the partition engine reads.

    Defaults come from ``delve.config``; pass a customized instance to a
    generator to override them for one build.
    """

    tile_unit: int = config.TILE_UNIT
    forced_split_depth: int = config.BSP_FORCED_SPLIT_DEPTH
    min_aspect_ratio: float = config.BSP_MIN_ASPECT_RATIO
    max_aspect_ratio: float = config.BSP_MAX_ASPECT_RATIO
    min_split_area: float = config.BSP_MIN_SPLIT_AREA
    max_split_area: float = config.BSP_MAX_SPLIT_AREA
    depth_decay_base: float = config.BSP_DEPTH_DECAY_BASE
    depth_decay_floor: float = config.BSP_DEPTH_DECAY_FLOOR
    merge_probability: float = config.BSP_MERGE_PROBABILITY
    merge_depth_threshold: int = config.BSP_MERGE_DEPTH_THRESHOLD
    max_split_depth: int = config.BSP_MAX_SPLIT_DEPTH

    def __post_init__(self) -> None:
        if self.tile_unit <= 0:
            raise ValueError(f"tile_unit must be positive, got {self.tile_unit}")
        if self.max_split_area <= self.min_split_area:
            raise ValueError(
                "max_split_area must be greater than min_split_area "
                f"({self.max_split_area} <= {self.min_split_area})"
            )
        if not 0 < self.min_aspect_ratio <= self.max_aspect_ratio:
            raise ValueError(
                f"Invalid aspect ratio bounds: "
                f"[{self.min_aspect_ratio}, {self.max_aspect_ratio}]"
            )
