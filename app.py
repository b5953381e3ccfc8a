#!/usr/bin/env python3
"""
Main entry point for the short URL microservice.

Links live in process memory, so the service runs as a single uvicorn
process; requests are still served concurrently on the event loop.

Usage:
    python app.py

Environment variables:
    HOST - Address to bind to
    PORT - Port to listen on (default 3000)
    RESOLVER_TIMEOUT_SECONDS - Bound on each host name lookup
    LOG_LEVEL - Logging level
    LOG_FILE - Optional log file
    LOG_JSON - Set to true for JSON log lines
"""

import signal
import sys
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import load_config
from shorturl.store import LinkStore
from shorturl.resolver import HostResolver
from shorturl.service import ShortURLService
from shorturl.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    config = app.state.config
    logger = app.state.logger

    logger.info("Starting URL shortener service...")

    store = LinkStore(logger=logger.getChild("store"))
    resolver = HostResolver(
        timeout_seconds=config.resolver_timeout_seconds,
        logger=logger.getChild("resolver"),
    )
    service = ShortURLService(
        store=store,
        resolver=resolver,
        logger=logger.getChild("service"),
    )

    app.state.store = store
    app.state.service = service

    logger.info("Service started successfully")

    yield

    logger.info(f"Shutting down URL shortener service ({store.count()} links discarded)")


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Microservice")
    logger.info(f"Configuration: {config.model_dump()}")

    # Store and service are created in lifespan
    app = create_app(
        store_instance=None,
        service_instance=None,
        config=config,
        logger=logger,
    )

    app.state.logger = logger
    app.router.lifespan_context = lifespan

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        workers=1,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    try:
        logger.info(f"URL Shortener listening on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
