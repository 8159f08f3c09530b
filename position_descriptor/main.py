from __future__ import annotations

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from position_descriptor.api.routers.formatting import router as formatting_router
from position_descriptor.api.routers.token_uri import router as token_uri_router
from position_descriptor.shared.config import get_settings


settings = get_settings()
logging.basicConfig(level=settings.log_level)

app = FastAPI(title="Position Descriptor API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(formatting_router)
app.include_router(token_uri_router)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
