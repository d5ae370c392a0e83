"""
Service layer abstraction.

``ProposalStore`` talks to the remote proposals API and reports every
outcome as a ``Result``.  ``ProposalService`` wraps a store and turns
failures into plain default values for callers that do not care why a
request failed.
"""
