"""
FastAPI application exposing dashboard URL resolution.
"""

import logging

from fastapi import FastAPI

from kibana_me_logs import __version__
from kibana_me_logs.api.routers import router as api_router

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="kibana-me-logs", version=__version__)
app.include_router(api_router)
