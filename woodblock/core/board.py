"""
Board layout for the wood-block relief.

Turns an expanded height grid into renderer-ready block data: a position
for every block (board centred on the origin) and a colour from the
four-level wood ramp. No scene is built here.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import numpy as np
import structlog
from pydantic import BaseModel, Field

from .base_field import HEIGHT_LEVELS, MAX_HEIGHT, generate_base_field
from .pattern_catalog import PatternParams, TilingMode, get_pattern_params, normalize_pattern_id
from .tile_expansion import expand_grid

logger = structlog.get_logger()

# Dark brown (0 mm) through goldenrod (6 mm)
HEIGHT_COLORS: Tuple[str, ...] = ("#8B4513", "#A0522D", "#CD853F", "#DAA520")


class BoardSettings(BaseModel):
    """Geometry and colour settings for laying out blocks."""

    block_pitch: float = Field(default=1.5, gt=0, description="Distance between block centres")
    block_size: float = Field(default=1.4, gt=0, description="Edge length of a block")
    base_height: float = Field(default=0.7, description="Centre height of a 0 mm block")
    height_scale: float = Field(default=0.1, description="Vertical offset per mm of height")
    board_thickness: float = Field(default=0.5, gt=0, description="Thickness of the base board")
    board_color: str = Field(default="#8B7355", description="Base board colour")


@dataclass(frozen=True)
class Block:
    """A single placed block."""

    i: int
    j: int
    height: int
    level: int
    color: str
    position: Tuple[float, float, float]


@dataclass
class Board:
    """Block layout of a whole board for one pattern."""

    pattern_id: int
    label: str
    tiling: TilingMode
    grid_size: int
    extent: float
    heights: np.ndarray
    blocks: List[Block] = field(default_factory=list)


def height_level(height: int) -> int:
    """Level index 0-3 of a discrete height in mm."""
    return min(max(int(height), 0), MAX_HEIGHT) // 2


def height_color(height: int) -> str:
    """Ramp colour of a discrete height."""
    return HEIGHT_COLORS[height_level(height)]


def text_color(height: int) -> str:
    """Legible label colour on top of height_color (light text on dark wood)."""
    return "#000" if height_level(height) >= 2 else "#fff"


def color_legend() -> Dict[int, str]:
    """Height in mm -> ramp colour, for every level."""
    return {height: height_color(height) for height in HEIGHT_LEVELS}


def describe_tiling(params: PatternParams) -> str:
    """Human-readable tiling note for a pattern."""
    if params.tiling is TilingMode.PERIODIC:
        return "periodic tiling (diagonal stripes repeat without reflection)"
    return "mirrored tiling (odd tiles are reflected)"


def block_position(
    i: int, j: int, height: int, grid_size: int, settings: Optional[BoardSettings] = None
) -> Tuple[float, float, float]:
    """
    Centre of block (i, j) with the board centred on the origin.

    Args:
        i: Grid row
        j: Grid column
        height: Discrete height in mm
        grid_size: Board side in blocks
        settings: Layout settings

    Returns:
        (x, y, z) with y pointing up
    """
    settings = settings or BoardSettings()
    pitch = settings.block_pitch
    offset = grid_size * pitch / 2 - pitch / 2
    x = i * pitch - offset
    y = height * settings.height_scale + settings.base_height
    z = j * pitch - offset
    return (x, y, z)


def level_histogram(grid: np.ndarray) -> Dict[int, int]:
    """Number of cells at each discrete height; every level is present."""
    values, counts = np.unique(np.asarray(grid), return_counts=True)
    histogram = {height: 0 for height in HEIGHT_LEVELS}
    for value, count in zip(values.tolist(), counts.tolist()):
        histogram[int(value)] = int(count)
    return histogram


def build_board(
    pattern_id: int, grid_size: int, settings: Optional[BoardSettings] = None
) -> Board:
    """
    Lay out every block of a grid_size x grid_size board for a pattern.

    Args:
        pattern_id: Any integer pattern id
        grid_size: Board side in blocks, already clamped by the caller
        settings: Layout settings

    Returns:
        Board with one Block per cell, in row-major order
    """
    settings = settings or BoardSettings()
    params = get_pattern_params(pattern_id)
    heights = expand_grid(generate_base_field(params), pattern_id, grid_size)

    blocks = []
    for i in range(grid_size):
        for j in range(grid_size):
            height = int(heights[i, j])
            blocks.append(
                Block(
                    i=i,
                    j=j,
                    height=height,
                    level=height_level(height),
                    color=height_color(height),
                    position=block_position(i, j, height, grid_size, settings),
                )
            )

    logger.debug("Board laid out", pattern_id=pattern_id, grid_size=grid_size, blocks=len(blocks))

    return Board(
        pattern_id=normalize_pattern_id(pattern_id),
        label=params.label,
        tiling=params.tiling,
        grid_size=grid_size,
        extent=grid_size * settings.block_pitch,
        heights=heights,
        blocks=blocks,
    )
