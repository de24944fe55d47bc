"""
Controllers package

Contains FastAPI route controllers:
- feed_controller: Landing page and filtered feed endpoint
- status_controller: Host resource status endpoint
"""

from .feed_controller import router as feed_router
from .status_controller import router as status_router

__all__ = ["feed_router", "status_router"]
