import logging
import os

from fastapi import FastAPI

from api.routers import categories, context, ops, tasks

# Logging configuration
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s [%(levelname)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="taskmind")

app.include_router(tasks.router)
app.include_router(context.router)
app.include_router(categories.router)
app.include_router(ops.router)

logger.info("taskmind API routes registered")
