"""Runtime entrypoint that layers custom behaviour on the generated FastAPI app."""

from __future__ import annotations

from fastapi.middleware.cors import CORSMiddleware

from libindex_api import main as generated_main
from libindex_api.db.migrations import upgrade_database
from libindex_api.service.facade import get_index_services

app = generated_main.app

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("startup")
def _startup() -> None:
    upgrade_database()


@app.on_event("shutdown")
async def _shutdown() -> None:
    await get_index_services().enrichment.drain()
