#!/usr/bin/env python3
"""
Simple demo script showing pattern generation and tile expansion.
"""

import numpy as np
from woodblock.core import (
    BASE_SIZE, HEIGHT_LEVELS, generate_base_field, expand_grid,
    get_pattern_params, list_patterns,
)
from woodblock.core.board import describe_tiling

# One character per height level, lowest first
SHADES = " .o#"


def render_ascii(grid):
    """Render a height grid as text, one character per block."""
    return "\n".join(
        "".join(SHADES[height // 2] for height in row) for row in grid.tolist()
    )


def main():
    """Demonstrate pattern generation."""
    print("Wood Block Relief Pattern Demo")
    print("=" * 40)

    print("\nAvailable patterns:")
    print("-" * 30)
    for pattern_id, params in list_patterns():
        print(f"  {pattern_id:2d}. {params.label} [{params.tiling.value}]")

    grid_size = 20
    for pattern_id in (1, 2, 5, 6, 10):
        params = get_pattern_params(pattern_id)
        print(f"\nPattern {pattern_id}: {params.label}")
        print("-" * 30)
        print(f"  {describe_tiling(params)}")

        field = generate_base_field(params)
        grid = expand_grid(field, pattern_id, grid_size)

        # Show height distribution
        heights, counts = np.unique(grid, return_counts=True)
        distribution = dict(zip(heights.tolist(), counts.tolist()))
        for height in HEIGHT_LEVELS:
            print(f"    {height} mm: {distribution.get(height, 0)}")

        print(f"\n  Base field ({BASE_SIZE}x{BASE_SIZE}):")
        print(render_ascii(field))
        print(f"\n  Board ({grid_size}x{grid_size}):")
        print(render_ascii(grid))

    # Ids wrap around the catalog
    print("\n\nCyclic ids:")
    print("-" * 30)
    for pattern_id in (-1, 0, 11, 25):
        print(f"  {pattern_id:3d} -> {get_pattern_params(pattern_id).label}")


if __name__ == "__main__":
    main()
