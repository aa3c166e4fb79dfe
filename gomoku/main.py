import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gomoku.config import CORS_ORIGINS, LOG_LEVEL
from gomoku.ws_handler import router as ws_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="Gomoku")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[o.strip() for o in CORS_ORIGINS.split(",")],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(ws_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
