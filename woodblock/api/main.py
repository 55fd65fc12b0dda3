"""FastAPI main application."""

import logging
from typing import Dict, List, Optional, Tuple

import structlog
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from .. import __version__
from ..config import settings
from ..core.base_field import generate_base_field
from ..core.board import (
    build_board,
    color_legend,
    describe_tiling,
    level_histogram,
)
from ..core.pattern_catalog import (
    PatternParams,
    get_pattern_params,
    list_patterns,
    normalize_pattern_id,
)
from ..core.tile_expansion import expand_grid

# Configure logging
logging.basicConfig(format="%(message)s", level=settings.log_level.upper())

structlog.configure(
    processors=[
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.JSONRenderer()
        if settings.log_format == "json"
        else structlog.dev.ConsoleRenderer(),
    ],
    wrapper_class=structlog.stdlib.BoundLogger,
    logger_factory=structlog.stdlib.LoggerFactory(),
    cache_logger_on_first_use=True,
)

logger = structlog.get_logger()

# Initialize FastAPI app
app = FastAPI(
    title="Wood Block Relief API",
    description="Pattern generation and tile expansion for wood-block relief boards",
    version=__version__,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Configure appropriately for production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Response models
class PatternInfo(BaseModel):
    """Parameters of a catalog entry."""

    id: int = Field(..., description="Normalized pattern id (1-based)")
    kind: str
    frequency: int
    amplitude: float
    direction_degrees: float
    phase_degrees: float
    mirror_domain: bool
    label: str
    tiling: str
    tiling_description: str


class BaseFieldResponse(BaseModel):
    """Discretized base field of a pattern."""

    pattern: PatternInfo
    base_size: int
    cells: List[List[int]]
    legend: Dict[int, str]


class GridResponse(BaseModel):
    """Expanded height grid."""

    pattern: PatternInfo
    grid_size: int
    heights: List[List[int]]
    histogram: Dict[int, int]


class BlockInfo(BaseModel):
    """A single placed block."""

    i: int
    j: int
    height: int
    level: int
    color: str
    position: Tuple[float, float, float]


class BoardResponse(BaseModel):
    """Block layout of a board."""

    pattern: PatternInfo
    grid_size: int
    extent: float
    blocks: List[BlockInfo]


def _pattern_info(pattern_id: int, params: Optional[PatternParams] = None) -> PatternInfo:
    params = params or get_pattern_params(pattern_id)
    return PatternInfo(
        id=normalize_pattern_id(pattern_id),
        kind=params.kind.value,
        frequency=params.frequency,
        amplitude=params.amplitude,
        direction_degrees=params.direction_degrees,
        phase_degrees=params.phase_degrees,
        mirror_domain=params.mirror_domain,
        label=params.label,
        tiling=params.tiling.value,
        tiling_description=describe_tiling(params),
    )


GridSizeQuery = Query(
    settings.default_grid_size,
    ge=settings.min_grid_size,
    le=settings.max_grid_size,
    description="Board side in blocks",
)


# Event handlers
@app.on_event("startup")
async def startup_event():
    logger.info("Starting Wood Block Relief API", version=__version__)


@app.on_event("shutdown")
async def shutdown_event():
    logger.info("Shutting down Wood Block Relief API")


# API endpoints
@app.get("/")
async def root():
    """Root endpoint."""
    return {
        "message": "Wood Block Relief API",
        "version": __version__,
        "status": "running",
    }


@app.get("/health")
async def health_check():
    """Health check endpoint."""
    return {"status": "healthy"}


@app.get("/patterns", response_model=List[PatternInfo])
async def get_patterns():
    """List every catalog entry."""
    return [_pattern_info(pattern_id, params) for pattern_id, params in list_patterns()]


@app.get("/patterns/{pattern_id}", response_model=PatternInfo)
async def get_pattern(pattern_id: int):
    """
    Get the parameters a pattern id resolves to.

    Any integer is accepted; ids outside the catalog wrap cyclically.
    """
    return _pattern_info(pattern_id)


@app.get("/patterns/{pattern_id}/base-field", response_model=BaseFieldResponse)
async def get_base_field(pattern_id: int):
    """Get the discretized base field of a pattern."""
    params = get_pattern_params(pattern_id)
    try:
        field = generate_base_field(params)
    except ValueError as e:
        logger.error("Base field generation failed", pattern_id=pattern_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Base field generation failed: {str(e)}")

    return BaseFieldResponse(
        pattern=_pattern_info(pattern_id, params),
        base_size=field.shape[0],
        cells=field.tolist(),
        legend=color_legend(),
    )


@app.get("/patterns/{pattern_id}/grid", response_model=GridResponse)
async def get_grid(pattern_id: int, grid_size: int = GridSizeQuery):
    """Expand a pattern onto a grid_size x grid_size grid."""
    logger.info("Grid requested", pattern_id=pattern_id, grid_size=grid_size)

    params = get_pattern_params(pattern_id)
    try:
        heights = expand_grid(generate_base_field(params), pattern_id, grid_size)
    except ValueError as e:
        logger.error("Grid expansion failed", pattern_id=pattern_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Grid expansion failed: {str(e)}")

    return GridResponse(
        pattern=_pattern_info(pattern_id, params),
        grid_size=grid_size,
        heights=heights.tolist(),
        histogram=level_histogram(heights),
    )


@app.get("/patterns/{pattern_id}/board", response_model=BoardResponse)
async def get_board(pattern_id: int, grid_size: int = GridSizeQuery):
    """Lay out every block of a board for a pattern."""
    logger.info("Board requested", pattern_id=pattern_id, grid_size=grid_size)

    try:
        board = build_board(pattern_id, grid_size)
    except ValueError as e:
        logger.error("Board layout failed", pattern_id=pattern_id, error=str(e))
        raise HTTPException(status_code=500, detail=f"Board layout failed: {str(e)}")

    return BoardResponse(
        pattern=_pattern_info(pattern_id),
        grid_size=board.grid_size,
        extent=board.extent,
        blocks=[
            BlockInfo(
                i=block.i,
                j=block.j,
                height=block.height,
                level=block.level,
                color=block.color,
                position=block.position,
            )
            for block in board.blocks
        ],
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
