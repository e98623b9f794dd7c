# app/main.py
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.core.db import init_db, close_db

from app.api.v1.patterns import build_dispatcher
from app.api.v1.routers import rpc
from app.api.v1.routers.ws_rpc import router as ws_rpc_router

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.on_event("startup")
async def on_startup():
    await init_db()
    app.state.dispatcher = build_dispatcher()
    logger.info("[startup] %d patterns registered", len(app.state.dispatcher.patterns))

@app.on_event("shutdown")
async def on_shutdown():
    await close_db()

# Request/reply
app.include_router(rpc.router, prefix="/api/v1")

# Message stream
app.include_router(ws_rpc_router)

@app.get("/healthz")
def healthz():
    return {"ok": True}
