"""Entry point for the Proposal Planner front-end.

Starts the FastAPI application with Uvicorn.  Configuration such as
the proposals API url, log level and listen address is read from
environment variables; see ``proposal_planner/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from proposal_planner.app.core.config import settings
from proposal_planner.app.main import app


async def main() -> None:
    """Serve the front-end until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
