"""
Top‑level package for the Proposal Planner.

Makes ``proposal_planner`` importable so that modules within ``app``
can be referenced by fully qualified names such as
``proposal_planner.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []
