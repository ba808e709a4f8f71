import logging

# Log configuration (before other imports)
# ruff: noqa: E402
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)

from contextlib import asynccontextmanager  # noqa: E402

from fastapi import FastAPI  # noqa: E402
from fastapi.middleware.cors import CORSMiddleware  # noqa: E402
from app.api.base import api_router  # noqa: E402
from app.services.editor.registry import editor_sessions  # noqa: E402

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    yield
    # Cancel pending autosaves so nothing fires after shutdown
    logger.info(f"Closing {len(editor_sessions)} open editor sessions")
    await editor_sessions.close_all()


app = FastAPI(
    title="Notes Editor API",
    description="Backend API for a note-taking app with a rich-text editor and autosave",
    version="1.0.0",
    lifespan=lifespan,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Specify your frontend URL in production
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include all API routes
app.include_router(api_router)


@app.get("/")
def read_root():
    return {
        "message": "Notes Editor API",
        "docs": "/docs",
        "version": "1.0.0"
    }
