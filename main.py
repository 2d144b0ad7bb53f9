import os

import uvicorn
from loguru import logger

from app.core.app import app  # noqa: F401
from app.core.config import settings

if __name__ == "__main__" and settings.APP_ENV != "vercel":
    PORT = int(os.getenv("PORT", settings.PORT))
    reload = settings.APP_ENV == "development"
    logger.info(f"Starting Douban proxy on {settings.HOST}:{PORT} ({settings.APP_ENV})")
    uvicorn.run("app.core.app:app", host=settings.HOST, port=PORT, reload=reload)
