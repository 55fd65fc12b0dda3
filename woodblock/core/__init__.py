"""
Core pattern generation and tile expansion.
"""

from .pattern_catalog import (
    PatternParams, WaveKind, TilingMode, PATTERN_CATALOG, NO_MIRROR_IDS,
    get_pattern_params, normalize_pattern_id, list_patterns,
)
from .base_field import BASE_SIZE, HEIGHT_LEVELS, generate_base_field, discretize
from .tile_expansion import height_at, expand_grid
from .board import Board, Block, BoardSettings, build_board, HEIGHT_COLORS

__all__ = ['PatternParams', 'WaveKind', 'TilingMode', 'PATTERN_CATALOG', 'NO_MIRROR_IDS',
           'get_pattern_params', 'normalize_pattern_id', 'list_patterns',
           'BASE_SIZE', 'HEIGHT_LEVELS', 'generate_base_field', 'discretize',
           'height_at', 'expand_grid',
           'Board', 'Block', 'BoardSettings', 'build_board', 'HEIGHT_COLORS']
