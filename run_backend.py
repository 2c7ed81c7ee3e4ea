#!/usr/bin/env python3
"""Start the floorplan geometry API server."""

import uvicorn

from floorplanner.config import Settings

if __name__ == "__main__":
    uvicorn.run(
        "floorplanner.api.main:app",
        host=Settings.HOST,
        port=Settings.PORT,
        reload=Settings.RELOAD,
        reload_dirs=["floorplanner"],
    )
