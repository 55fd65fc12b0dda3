"""
Tile expansion of a base field onto an arbitrary grid.

The expanded grid is covered by base-size tiles. Patterns with mirrored
tiling reflect the local coordinates inside odd tiles so adjacent tiles
meet edge to edge; periodic patterns simply repeat.
"""

from typing import Tuple

import numpy as np
import structlog

from .base_field import field_size
from .pattern_catalog import TilingMode, get_pattern_params

logger = structlog.get_logger()


def tiling_for(pattern_id: int) -> TilingMode:
    """Tiling mode of the catalog entry a pattern id resolves to."""
    return get_pattern_params(pattern_id).tiling


def local_coordinates(
    i: int, j: int, base_size: int, tiling: TilingMode
) -> Tuple[int, int]:
    """
    Map a grid coordinate to the base field cell it reads from.

    Args:
        i: Grid row, >= 0
        j: Grid column, >= 0
        base_size: Side of the base field
        tiling: Whether odd tiles are reflected

    Returns:
        (local_i, local_j) index into the base field
    """
    if i < 0 or j < 0:
        raise ValueError(f"Grid coordinates must be non-negative, got ({i}, {j})")

    tile_x, local_i = divmod(i, base_size)
    tile_y, local_j = divmod(j, base_size)

    if tiling is TilingMode.MIRRORED:
        if tile_x % 2 == 1:
            local_i = base_size - 1 - local_i
        if tile_y % 2 == 1:
            local_j = base_size - 1 - local_j

    return local_i, local_j


def height_at(i: int, j: int, field: np.ndarray, pattern_id: int) -> int:
    """
    Height of grid cell (i, j) for a pattern expanded from its base field.

    Args:
        i: Grid row, >= 0
        j: Grid column, >= 0
        field: Base field produced by generate_base_field
        pattern_id: Pattern id the field was generated for

    Returns:
        Discrete height in {0, 2, 4, 6}
    """
    base_size = field_size(field)
    local_i, local_j = local_coordinates(i, j, base_size, tiling_for(pattern_id))
    return int(field[local_i][local_j])


def expand_grid(field: np.ndarray, pattern_id: int, grid_size: int) -> np.ndarray:
    """
    Expand a base field onto a full grid_size x grid_size grid.

    Vectorized equivalent of calling height_at for every cell.

    Args:
        field: Base field produced by generate_base_field
        pattern_id: Pattern id the field was generated for
        grid_size: Side of the expanded grid

    Returns:
        Read-only (grid_size, grid_size) integer array of heights
    """
    if grid_size < 0:
        raise ValueError(f"Grid size must be non-negative, got {grid_size}")

    field = np.asarray(field)
    base_size = field_size(field)
    tiling = tiling_for(pattern_id)

    rows, cols = np.indices((grid_size, grid_size))
    tile_x, local_i = np.divmod(rows, base_size)
    tile_y, local_j = np.divmod(cols, base_size)

    if tiling is TilingMode.MIRRORED:
        local_i = np.where(tile_x % 2 == 1, base_size - 1 - local_i, local_i)
        local_j = np.where(tile_y % 2 == 1, base_size - 1 - local_j, local_j)

    grid = field[local_i, local_j].astype(np.int64)
    grid.setflags(write=False)

    logger.debug(
        "Grid expanded",
        pattern_id=pattern_id,
        grid_size=grid_size,
        tiling=tiling.value,
    )
    return grid
