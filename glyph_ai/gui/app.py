"""FastAPI application for poking at Glyphtender AI decisions."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from . import __version__
from .api_routes import router

app = FastAPI(
    title="Glyphtender AI Debugger",
    description="Run AI seats against posted game states and inspect their reasoning",
    version=__version__,
)

# Add CORS middleware for development
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(router, prefix="/api")


@app.get("/")
async def index():
    """Where to look next."""
    return {"service": "glyph-ai-gui", "version": __version__, "docs": "/docs", "api": "/api"}


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "glyph-ai-gui"}
