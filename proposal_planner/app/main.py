"""
Main entrypoint for the Proposal Planner front-end.

This module assembles the FastAPI application, sets up logging and
includes the page routes.  The ``create_app`` function builds and
configures the app, which is then instantiated at module import time
as ``app``, e.g.::

    uvicorn proposal_planner.app.main:app --reload

A single :class:`ProposalService` (and therefore a single proposal
cache) is shared by every request handled by one application.
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.routes import router
from .core.config import Settings, settings as default_settings
from .core.logging_config import setup_logging
from .services.proposal_service import ProposalService
from .services.proposal_store import ProposalStore

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    service: Optional[ProposalService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; the module-level settings by default.
    service : Optional[ProposalService]
        Service to serve requests with.  When omitted a store pointing
        at ``settings.api_base_url`` is created.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    cfg = settings or default_settings
    # Logging first so that everything below can log.
    setup_logging(cfg.log_level, cfg.log_file)

    app = FastAPI(title=cfg.project_name, version=cfg.api_version, debug=cfg.debug)
    if service is None:
        store = ProposalStore(base_url=cfg.api_base_url, timeout=cfg.request_timeout)
        service = ProposalService(store)
        logger.info("Using proposals API at %s", store.proposals_url)
    app.state.settings = cfg
    app.state.proposal_service = service

    app.include_router(router)

    @app.on_event("shutdown")
    async def shutdown_event() -> None:
        await app.state.proposal_service.aclose()

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
