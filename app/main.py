from fastapi import FastAPI
from app.logging_config import setup_logging
from app.routers import actions, health

setup_logging()

app = FastAPI(title="Absolve Action Hub")

app.include_router(actions.router, prefix="/api/v1")
app.include_router(health.router, prefix="/api/v1")
