"""Entry point for serving the Customer Management API.

Host and port are read from the ``API_HOST`` and ``API_PORT``
environment variables.  Store and logging settings are read by the
application itself (see ``customer_management_api/app/core/config.py``).

Usage:
    python run.py
"""
import asyncio
import logging
import os
from uvicorn import Config, Server

from customer_management_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Defaults are ``0.0.0.0`` and ``8000``.
    """
    api_host = os.getenv("API_HOST", "0.0.0.0")
    api_port = int(os.getenv("API_PORT", "8000"))
    config = Config(app=app, host=api_host, port=api_port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
