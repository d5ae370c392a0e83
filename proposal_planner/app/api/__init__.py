"""
Front-end routes.

A static route table mirroring the browser application's pages
(``/home``, ``/proposal``, ``/game/{game_url}``) plus the placeholder
login screen.  Every handler delegates to ``ProposalService``.
"""
