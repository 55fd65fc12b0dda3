"""
Pattern catalog for the wood-block relief board.

Maps a small integer pattern id onto one of a fixed, ordered list of wave
presets. Ids are interpreted cyclically so every integer resolves to exactly
one entry; nothing here ever rejects an id.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet, List, Tuple


class WaveKind(str, Enum):
    """Closed set of signal kinds the base field generator can evaluate."""

    SINE = "sine"
    DOUBLE_SINE = "double"
    CIRCULAR = "circular"
    CHECKERBOARD = "checkerboard"


class TilingMode(str, Enum):
    """How a base field is repeated across the expanded grid."""

    MIRRORED = "mirrored"  # odd tiles are reflected
    PERIODIC = "periodic"  # plain repetition


@dataclass(frozen=True)
class PatternParams:
    """Parameters of a single catalog entry."""

    kind: WaveKind
    frequency: int
    amplitude: float
    direction_degrees: float
    phase_degrees: float
    mirror_domain: bool
    label: str
    tiling: TilingMode = TilingMode.MIRRORED


# Order matters: entry n (1-based) is what pattern id n resolves to.
# Diagonal stripe families rotate the domain by 45 degrees and already
# tile seamlessly, so they repeat without reflection.
PATTERN_CATALOG: Tuple[PatternParams, ...] = (
    PatternParams(WaveKind.SINE, 2, 3.0, 0, 0, False, "Horizontal wave (basic)"),
    PatternParams(WaveKind.SINE, 3, 3.0, 0, 0, True, "Diagonal stripes (dense) ///",
                  TilingMode.PERIODIC),
    PatternParams(WaveKind.SINE, 2, 3.0, 90, 0, True, "Diagonal stripes (standard) ///",
                  TilingMode.PERIODIC),
    PatternParams(WaveKind.SINE, 2, 3.0, 45, 0, False, "Diagonal wave 45°"),
    PatternParams(WaveKind.DOUBLE_SINE, 2, 3.0, 0, 0, False, "Lattice"),
    PatternParams(WaveKind.CIRCULAR, 2, 3.0, 0, 0, False, "Concentric rings"),
    PatternParams(WaveKind.SINE, 1, 3.0, 0, 0, True, "Gentle diagonal stripes ///",
                  TilingMode.PERIODIC),
    PatternParams(WaveKind.DOUBLE_SINE, 3, 3.0, 0, 0, False, "Fine lattice"),
    PatternParams(WaveKind.SINE, 2, 3.0, 0, 90, True, "Phase-shifted diagonal stripes ///",
                  TilingMode.PERIODIC),
    PatternParams(WaveKind.CHECKERBOARD, 2, 3.0, 0, 0, False, "Checkerboard"),
)

CATALOG_SIZE = len(PATTERN_CATALOG)


def normalize_pattern_id(pattern_id: int) -> int:
    """Wrap any integer onto the 1-based catalog range [1, CATALOG_SIZE]."""
    # Python's modulo is already non-negative for a positive divisor
    return (pattern_id - 1) % CATALOG_SIZE + 1


def get_pattern_params(pattern_id: int) -> PatternParams:
    """
    Look up the parameters for a pattern id.

    Total over all integers: ids outside [1, CATALOG_SIZE], including zero
    and negatives, wrap cyclically onto the catalog.

    Args:
        pattern_id: Any integer pattern id

    Returns:
        The catalog entry the id resolves to
    """
    return PATTERN_CATALOG[normalize_pattern_id(pattern_id) - 1]


def list_patterns() -> List[Tuple[int, PatternParams]]:
    """All catalog entries paired with their canonical 1-based ids."""
    return [(index + 1, params) for index, params in enumerate(PATTERN_CATALOG)]


def _no_mirror_ids() -> FrozenSet[int]:
    return frozenset(
        pattern_id
        for pattern_id, params in list_patterns()
        if params.tiling is TilingMode.PERIODIC
    )


# Canonical ids that repeat without reflection: {2, 3, 7, 9}
NO_MIRROR_IDS = _no_mirror_ids()
