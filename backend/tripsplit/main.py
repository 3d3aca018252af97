"""FastAPI app entrypoint."""
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tripsplit.config import get_settings
from tripsplit.routers import balances, splits

settings = get_settings()

logging.basicConfig(format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logging.getLogger("tripsplit").setLevel(settings.log_level)

app = FastAPI(
    title="Trip Split API",
    description="Split trip expenses exactly and work out who should pay whom. Stateless: send a snapshot, get the numbers.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.allowed_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(splits.router, prefix="/api")
app.include_router(balances.router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Trip Split API", "docs": "/docs"}
