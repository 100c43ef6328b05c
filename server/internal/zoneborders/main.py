"""
Zone Border Service
Main entry point for the Python zone border generation service.
"""

import logging
import math
import sys
from pathlib import Path

# Add server directory to path for imports
server_dir = Path(__file__).parent.parent.parent
sys.path.insert(0, str(server_dir))

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field
from typing import Optional, List, Dict, Any
import uvicorn

from internal.zoneborders import config
from internal.zoneborders import borders
from internal.zoneborders import sampling
from internal.zoneborders import zones

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Zone Border Service",
    description="Service for generating oriented border tile nodes around zones",
    version="0.1.0",
)

# CORS middleware (allow the game server and editor previews to call this service)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Load configuration
cfg = config.load_config()


class HealthResponse(BaseModel):
    """Health check response"""

    status: str
    service: str
    version: str


class ZoneModel(BaseModel):
    """Zone boundary description"""

    shape: Optional[str] = Field(
        default="Circle", description="Circle, Rectangle, Rect, Square or Box"
    )
    center_x: float = 0.0
    center_z: float = 0.0
    radius: float = 0.0
    min_x: float = 0.0
    max_x: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0

    def to_zone(self) -> zones.ZoneDescription:
        return zones.ZoneDescription(
            shape=self.shape,
            center_x=self.center_x,
            center_z=self.center_z,
            radius=self.radius,
            min_x=self.min_x,
            max_x=self.max_x,
            min_z=self.min_z,
            max_z=self.max_z,
        )


class BorderRequest(BaseModel):
    """Request to generate a zone border"""

    zone: ZoneModel
    spacing: Optional[float] = Field(
        default=None, description="Node spacing (uses default if not provided)"
    )


class BorderNodeModel(BaseModel):
    """One classified border node"""

    position: List[float]
    grid_key: List[int]
    previous_direction: List[float]
    next_direction: List[float]
    neighbor_mask: int
    signed_turn: float
    corner_type: str
    rotation_degrees: int


class BorderNodesResponse(BaseModel):
    """Response from border node generation"""

    success: bool
    shape: Optional[str] = None
    spacing: Optional[float] = None  # null when the requested spacing is not finite
    node_count: int
    corner_counts: Dict[str, int]
    nodes: List[BorderNodeModel] = []


class BorderPointsResponse(BaseModel):
    """Response from border point generation"""

    success: bool
    points: List[List[float]] = []


class BorderOutlineResponse(BaseModel):
    """Response from border outline generation"""

    success: bool
    outline: Optional[Dict[str, Any]] = None


class RingPointsRequest(BaseModel):
    """Request to generate a free-floating ring of points"""

    center_x: float = 0.0
    center_y: float = 0.0
    center_z: float = 0.0
    radius: float
    spacing: float
    start_angle_degrees: float = 0.0


def _resolve_spacing(request: BorderRequest) -> float:
    return request.spacing if request.spacing is not None else cfg.default_spacing


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check endpoint"""
    return HealthResponse(
        status="ok",
        service="zone-border-service",
        version="0.1.0",
    )


@app.post("/api/v1/zones/border-nodes", response_model=BorderNodesResponse)
async def generate_border_nodes(request: BorderRequest):
    """Generate classified border nodes for a zone."""
    try:
        spacing = _resolve_spacing(request)
        nodes = borders.get_zone_border_nodes(request.zone.to_zone(), spacing)

        return BorderNodesResponse(
            success=True,
            shape=request.zone.shape,
            spacing=spacing if math.isfinite(spacing) else None,
            node_count=len(nodes),
            corner_counts=borders.summarize_nodes(nodes),
            nodes=[BorderNodeModel(**node.to_dict()) for node in nodes],
        )

    except Exception as e:
        logger.exception("Border node generation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to generate border nodes: {str(e)}"
        )


@app.post("/api/v1/zones/border-points", response_model=BorderPointsResponse)
async def generate_border_points(request: BorderRequest):
    """Generate border positions only."""
    try:
        points = borders.get_zone_border_points(
            request.zone.to_zone(), _resolve_spacing(request)
        )
        return BorderPointsResponse(success=True, points=[list(p) for p in points])

    except Exception as e:
        logger.exception("Border point generation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to generate border points: {str(e)}"
        )


@app.post("/api/v1/zones/border-outline", response_model=BorderOutlineResponse)
async def generate_border_outline(request: BorderRequest):
    """Generate the sampled border as a GeoJSON polygon."""
    try:
        outline = borders.border_geojson(request.zone.to_zone(), _resolve_spacing(request))
        return BorderOutlineResponse(success=True, outline=outline)

    except Exception as e:
        logger.exception("Border outline generation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to generate border outline: {str(e)}"
        )


@app.post("/api/v1/rings/points", response_model=BorderPointsResponse)
async def generate_ring_points(request: RingPointsRequest):
    """Generate a free-floating ring of 3D points (legacy)."""
    try:
        points = sampling.generate_ring_points(
            request.center_x,
            request.center_y,
            request.center_z,
            request.radius,
            request.spacing,
            request.start_angle_degrees,
        )
        return BorderPointsResponse(success=True, points=[list(p) for p in points])

    except Exception as e:
        logger.exception("Ring point generation failed")
        raise HTTPException(
            status_code=500, detail=f"Failed to generate ring points: {str(e)}"
        )


if __name__ == "__main__":
    logging.basicConfig(level=cfg.log_level)

    uvicorn.run(
        "main:app", host=cfg.host, port=cfg.port, reload=cfg.environment == "development"
    )
