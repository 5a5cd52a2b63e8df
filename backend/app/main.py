"""
FastAPI application entry point.

Run with: uvicorn app.main:app --app-dir backend --port 3001
"""
import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from app.api import faucet, health, protocols, strategies
from app.core.config import get_settings
from app.core.exceptions import register_exception_handlers

app_settings = get_settings()

logging.basicConfig(
    level=getattr(logging, str(app_settings.log_level).upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="StackSave API",
    description="Yield dashboard API: protocols, strategy vaults and a test-token faucet",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=app_settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(health.router, prefix="/api", tags=["health"])
app.include_router(protocols.router, prefix="/api/protocols", tags=["protocols"])
app.include_router(strategies.router, prefix="/api/strategies", tags=["strategies"])
app.include_router(faucet.router, prefix="/api/faucet", tags=["faucet"])


@app.on_event("startup")
async def startup_event():
    logger.info(f"StackSave API ready ({app_settings.environment}, port {app_settings.port})")
