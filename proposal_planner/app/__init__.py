"""
Application package initializer.

The data-access layer lives in ``services`` (``ProposalStore`` and its
lenient ``ProposalService`` wrapper), request/response models in
``schemas`` and shared plumbing (settings, logging, result types and the
single-entry cache) in ``core``.  ``api`` holds the thin front-end that
calls the store.
"""

from .main import app  # noqa: F401
