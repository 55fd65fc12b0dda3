#!/usr/bin/env python3
"""
Visualize a wood-block relief pattern.
Generates an image showing the 10x10 base field as an annotated table next
to the expanded board, both coloured with the four-level wood ramp.
"""

import argparse
import sys
from pathlib import Path

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import BoundaryNorm, ListedColormap
from matplotlib.patches import Patch

sys.path.append(str(Path(__file__).parent))

from woodblock.config import clamp_grid_size, settings
from woodblock.core.base_field import HEIGHT_LEVELS, generate_base_field
from woodblock.core.board import (
    HEIGHT_COLORS,
    describe_tiling,
    level_histogram,
    text_color,
)
from woodblock.core.pattern_catalog import get_pattern_params, normalize_pattern_id
from woodblock.core.tile_expansion import expand_grid

# Boundaries put each discrete height in its own colour bin
HEIGHT_CMAP = ListedColormap(HEIGHT_COLORS)
HEIGHT_NORM = BoundaryNorm([-1, 1, 3, 5, 7], HEIGHT_CMAP.N)


def draw_base_field(ax, field):
    """Draw the base field with each cell labelled by its height in mm."""
    ax.imshow(field, cmap=HEIGHT_CMAP, norm=HEIGHT_NORM)
    for (i, j), height in np.ndenumerate(field):
        ax.text(j, i, str(height), ha="center", va="center",
                color=text_color(height), fontsize=8)

    size = field.shape[0]
    ax.set_xticks(range(size))
    ax.set_xticklabels([str(n + 1) for n in range(size)])
    ax.set_yticks(range(size))
    ax.set_yticklabels([str(n + 1) for n in range(size)])
    ax.set_title(f"Base pattern {size}x{size} (mm)")


def draw_grid(ax, grid, base_size):
    """Draw the expanded board with tile boundaries."""
    ax.imshow(grid, cmap=HEIGHT_CMAP, norm=HEIGHT_NORM)

    grid_size = grid.shape[0]
    for edge in range(base_size, grid_size, base_size):
        ax.axhline(edge - 0.5, color="black", linewidth=1)
        ax.axvline(edge - 0.5, color="black", linewidth=1)

    ax.set_title(f"Board {grid_size}x{grid_size}")
    ax.set_xticks([])
    ax.set_yticks([])


def visualize_pattern(pattern_id=1, grid_size=30, output_file=None, show=False):
    """
    Generate and visualize a pattern.

    Args:
        pattern_id: Pattern id (wrapped onto the catalog)
        grid_size: Board side in blocks (clamped to the configured range)
        output_file: PNG path, defaults to pattern_<id>_<size>.png
        show: Open an interactive window after saving
    """
    grid_size = clamp_grid_size(grid_size)
    params = get_pattern_params(pattern_id)
    canonical_id = normalize_pattern_id(pattern_id)

    print(f"Pattern {canonical_id}: {params.label}")
    print(f"  Kind: {params.kind.value}, frequency {params.frequency}")
    print(f"  Tiling: {describe_tiling(params)}")

    field = generate_base_field(params)
    grid = expand_grid(field, pattern_id, grid_size)

    # Statistics
    print(f"\nBoard {grid_size}x{grid_size} height distribution:")
    histogram = level_histogram(grid)
    total = grid.size
    for height in HEIGHT_LEVELS:
        count = histogram[height]
        print(f"  {height} mm: {count} ({count / total * 100:.1f}%)")

    fig, (ax1, ax2) = plt.subplots(1, 2, figsize=(14, 7))
    draw_base_field(ax1, field)
    draw_grid(ax2, grid, field.shape[0])

    legend = [Patch(facecolor=color, edgecolor="black", label=f"{height} mm")
              for height, color in zip(HEIGHT_LEVELS, HEIGHT_COLORS)]
    fig.legend(handles=legend, loc="lower center", ncol=len(legend))
    fig.suptitle(f"Pattern {canonical_id}: {params.label}", fontsize=16)

    if output_file is None:
        output_file = f"pattern_{canonical_id}_{grid_size}.png"
    plt.savefig(output_file, dpi=150, bbox_inches="tight")
    print(f"\nVisualization saved to: {output_file}")

    if show:
        plt.show()
    plt.close(fig)


def main():
    """Main function to generate visualizations."""
    parser = argparse.ArgumentParser(description="Visualize a wood-block relief pattern")
    parser.add_argument("--pattern", type=int, default=settings.default_pattern_id,
                        help="Pattern id (any integer, wrapped onto the catalog)")
    parser.add_argument("--grid-size", type=int, default=settings.default_grid_size,
                        help="Board side in blocks")
    parser.add_argument("--output", default=None, help="Output PNG file")
    parser.add_argument("--show", action="store_true", help="Open an interactive window")
    args = parser.parse_args()

    visualize_pattern(
        pattern_id=args.pattern,
        grid_size=args.grid_size,
        output_file=args.output,
        show=args.show,
    )


if __name__ == "__main__":
    main()
