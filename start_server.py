#!/usr/bin/env python3
"""
Startup script for the Taskini backend
This script starts the FastAPI server with configuration taken from the environment
"""

import logging

import uvicorn

from app.config.settings import settings

logger = logging.getLogger("taskini.server")


def main():
    host = settings.SERVER["host"]
    port = settings.SERVER["port"]
    reload = settings.SERVER["reload"]

    logging.basicConfig(level=settings.SERVER["log_level"], format="%(asctime)s [%(levelname)s] %(message)s")
    logger.info("Starting Taskini backend on %s:%s (reload=%s)", host, port, reload)

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.SERVER["log_level"].lower(),
    )


if __name__ == "__main__":
    main()
