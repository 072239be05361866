"""
API package.
"""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from .routes import clock
from ....common.config.manager import ConfigManager
from ....common.logging import configure_logging

# Plain uvicorn runs never pass through Hydra; handlers are left to the server
config = ConfigManager().load_clock_config()
configure_logging(config.logging.level, add_handler=False)

# Initialize main app
app = FastAPI(title="Berlin Clock API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["GET"],
    allow_headers=["*"],
)

app.include_router(clock.app.router, tags=["clock"])
