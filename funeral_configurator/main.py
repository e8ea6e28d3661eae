from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

from .config import settings
from .routers import catalog, quote, session

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("funeral_configurator")

app = FastAPI(
    title="Funeral Service Configurator",
    description="Plan selection, itemized pricing and 3D altar layout for memorial services",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# API routes
app.include_router(catalog.router, prefix="/api")
app.include_router(quote.router, prefix="/api")
app.include_router(session.router, prefix="/api")


@app.get("/health")
def health():
    return {"status": "ok", "app": settings.APP_NAME}


logger.info("%s started", settings.APP_NAME)
