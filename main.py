"""
Entry point for the User Records Backend
"""

import sys
import os
import logging

# Add src directory to Python path
sys.path.insert(0, os.path.join(os.path.dirname(__file__), 'src'))

# Import the FastAPI application
from app import app

logger = logging.getLogger(__name__)

if __name__ == "__main__":
    import uvicorn
    settings = app.state.settings
    logger.info(f"Starting User Records Backend on port {settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
