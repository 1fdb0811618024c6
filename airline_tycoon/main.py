"""FastAPI main application for playing and monitoring a game."""

import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import Config, GAME_NAME, GAME_VERSION
from .logger import configure_logging
from .routes import fleet_router, game_router, logs_router, saves_router, status_router

config = Config()

# Configure logging
configure_logging(config.LOG_LEVEL, config.LOG_FILE)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(title=f"{GAME_NAME} API", version=GAME_VERSION)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/")
async def root():
    """Root endpoint."""
    return {"message": f"{GAME_NAME} API", "version": GAME_VERSION}


app.include_router(game_router)
app.include_router(status_router)
app.include_router(fleet_router)
app.include_router(saves_router)
app.include_router(logs_router)


def run() -> None:
    """Serve the API with uvicorn."""
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    run()
