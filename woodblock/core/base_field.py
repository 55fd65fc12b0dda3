"""
Base field generation for the wood-block relief board.

Evaluates one of the closed-form 2D signals over a square coordinate domain
centred on the tile and discretizes the result onto four block heights
(0, 2, 4 and 6 mm). Uses NumPy for vectorized evaluation; the generator
keeps no state between calls.
"""

from typing import Callable, Dict

import numpy as np
import structlog

from .pattern_catalog import PatternParams, WaveKind

logger = structlog.get_logger()

BASE_SIZE = 10
HEIGHT_LEVELS = (0, 2, 4, 6)
MAX_HEIGHT = HEIGHT_LEVELS[-1]

SignalFn = Callable[[PatternParams, np.ndarray, np.ndarray, np.ndarray, np.ndarray, int], np.ndarray]


def _sine_signal(params, x, z, i, j, base_size):
    angle = np.radians(params.direction_degrees)
    rotated_x = x * np.cos(angle) + z * np.sin(angle)
    phase = np.radians(params.phase_degrees)
    return params.amplitude * np.sin(
        rotated_x * np.pi * params.frequency / base_size + phase
    )


def _double_sine_signal(params, x, z, i, j, base_size):
    k = np.pi * params.frequency / base_size
    return params.amplitude * (np.sin(x * k) * 0.5 + np.sin(z * k) * 0.5)


def _circular_signal(params, x, z, i, j, base_size):
    dist = np.sqrt(x * x + z * z)
    return params.amplitude * np.sin(dist * np.pi * params.frequency / base_size)


def _checkerboard_signal(params, x, z, i, j, base_size):
    # Uses the raw cell indices, so domain rotation has no effect
    return np.where((i + j) % 2 == 0, params.amplitude, -params.amplitude)


_SIGNALS: Dict[WaveKind, SignalFn] = {
    WaveKind.SINE: _sine_signal,
    WaveKind.DOUBLE_SINE: _double_sine_signal,
    WaveKind.CIRCULAR: _circular_signal,
    WaveKind.CHECKERBOARD: _checkerboard_signal,
}


def discretize(heights: np.ndarray, amplitude: float) -> np.ndarray:
    """
    Map continuous heights in [-amplitude, amplitude] onto {0, 2, 4, 6}.

    Rounds half up (floor(v + 0.5)) so a value exactly between two levels
    always lands on the higher one, then clamps into [0, MAX_HEIGHT] so
    amplitudes above 3 cannot overshoot.

    Args:
        heights: Continuous signal values
        amplitude: Amplitude the signal was evaluated with

    Returns:
        Integer array of discrete heights
    """
    levels = np.floor((np.asarray(heights, dtype=np.float64) + amplitude) / 2 + 0.5) * 2
    return np.clip(levels, 0, MAX_HEIGHT).astype(np.int64)


def evaluate_signal(params: PatternParams, base_size: int = BASE_SIZE) -> np.ndarray:
    """Evaluate the continuous signal of a pattern over the base domain."""
    signal = _SIGNALS.get(params.kind)
    if signal is None:
        raise ValueError(f"Unknown wave kind: {params.kind!r}")

    i, j = np.indices((base_size, base_size))
    x = i - base_size / 2
    z = j - base_size / 2

    # Rotating the domain by 45 degrees turns axis-aligned stripes diagonal
    if params.mirror_domain:
        x, z = (x + z) / np.sqrt(2), (z - x) / np.sqrt(2)

    return signal(params, x, z, i, j, base_size)


def generate_base_field(params: PatternParams, base_size: int = BASE_SIZE) -> np.ndarray:
    """
    Generate the discretized base field for a pattern.

    Args:
        params: Pattern parameters from the catalog
        base_size: Side of the square base domain

    Returns:
        Read-only (base_size, base_size) integer array of heights in {0, 2, 4, 6}
    """
    field = discretize(evaluate_signal(params, base_size), params.amplitude)
    field.setflags(write=False)

    logger.debug(
        "Base field generated",
        kind=params.kind.value,
        label=params.label,
        base_size=base_size,
    )
    return field


def field_size(field: np.ndarray) -> int:
    """Side length of a base field, validating that it is a non-empty square."""
    field = np.asarray(field)
    if field.ndim != 2 or field.shape[0] != field.shape[1] or field.shape[0] == 0:
        raise ValueError(f"Base field must be a non-empty square matrix, got shape {field.shape}")
    return field.shape[0]
