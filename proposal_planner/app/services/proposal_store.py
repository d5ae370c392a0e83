"""Asynchronous client for the remote proposals API.

:class:`ProposalStore` wraps the REST endpoints under
``/api/proposals`` and exposes one coroutine per operation:

* :meth:`ProposalStore.list_proposals` – every proposal on the server.
* :meth:`ProposalStore.get_proposal` – a single proposal, served from the
  single-entry cache when the id matches the last one fetched.
* :meth:`ProposalStore.add_proposal` – create a proposal.
* :meth:`ProposalStore.delete_proposal` – delete a proposal.
* :meth:`ProposalStore.get_activity` – one activity of a proposal.
* :meth:`ProposalStore.add_activity` – attach an activity to a proposal.

No operation raises because of the network or the server.  Each one
returns :class:`~proposal_planner.app.core.result.Ok` on success and
:class:`~proposal_planner.app.core.result.Err` carrying a
:class:`~proposal_planner.app.core.result.TransportFailure` otherwise;
the failure is logged before it is returned.

The cache is only ever written by a successful network fetch in
:meth:`get_proposal`.  Creating or deleting proposals and adding
activities leave it alone, so a deleted proposal can still be served
from the slot until another id is fetched or ``cache.clear()`` is
called.  Concurrent ``get_proposal`` calls for different ids are not
serialized: whichever response arrives last owns the slot.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Optional, Type, TypeVar, Union
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ValidationError

from proposal_planner.app.core.cache import SingleEntryCache
from proposal_planner.app.core.result import Err, Ok, Result, TransportFailure
from proposal_planner.app.schemas.proposal import Activity, Proposal


logger = logging.getLogger(__name__)

API_PATH = "/api/proposals"

M = TypeVar("M", bound=BaseModel)


def _error_message(response: httpx.Response) -> str:
    """Pull a readable message out of an error response."""
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return str(body.get("detail") or body.get("message") or body)
    return str(body)


def _path(*segments: Any) -> str:
    """Join ids into a path below ``/api/proposals``, escaping each one."""
    return "".join("/" + quote(str(segment), safe="") for segment in segments)


class ProposalStore:
    """Data-access layer for proposals and their activities.

    The store owns a :class:`SingleEntryCache` holding the most recently
    fetched proposal.  An ``httpx.AsyncClient`` may be injected (tests do
    this with ``httpx.MockTransport``); otherwise the store creates one
    and closes it in :meth:`aclose`.
    """

    http_headers: Dict[str, str] = {"Content-Type": "application/json"}

    def __init__(
        self,
        *,
        base_url: str,
        client: Optional[httpx.AsyncClient] = None,
        cache: Optional[SingleEntryCache[Proposal]] = None,
        timeout: Optional[float] = None,
    ) -> None:
        """Initialise the store.

        Args:
            base_url: Root URL of the API server, e.g.
                ``http://localhost:3000``.  ``/api/proposals`` is appended.
            client: Optional shared client.  The store does not close
                clients it did not create.
            cache: Optional cache instance.  A fresh one is created when
                omitted so that stores never share state.
            timeout: Passed to the client the store creates.  Ignored
                when ``client`` is given.
        """
        self.base_url = base_url.rstrip("/")
        self.proposals_url = f"{self.base_url}{API_PATH}"
        self.cache: SingleEntryCache[Proposal] = cache if cache is not None else SingleEntryCache()
        self._owns_client = client is None
        if client is None:
            client = httpx.AsyncClient(timeout=timeout) if timeout is not None else httpx.AsyncClient()
        self.client = client

    async def aclose(self) -> None:
        if self._owns_client:
            await self.client.aclose()

    async def __aenter__(self) -> "ProposalStore":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _fail(self, operation: str, message: str, status_code: Optional[int] = None) -> Err:
        failure = TransportFailure(operation=operation, message=message, status_code=status_code)
        logger.error("%s failed (%s): %s", operation, status_code, message)
        return Err(failure)

    async def _request(
        self, operation: str, method: str, path: str = "", *, json_body: Any = None
    ) -> Result[Any]:
        """Perform one HTTP request against the proposals API.

        Returns ``Ok(data)`` with the decoded JSON body (``None`` for an
        empty body) on a 2xx response and ``Err`` for anything else:
        non-2xx status, transport exceptions, or a body that is not
        JSON.
        """
        try:
            url = f"{self.proposals_url}{path}"
            logger.debug("Sending %s request to %s", method, url)
            response = await self.client.request(
                method,
                url,
                json=json_body,
                headers=self.http_headers,
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            message = _error_message(exc.response) or str(exc)
            return self._fail(operation, message, exc.response.status_code)
        except (httpx.HTTPError, httpx.InvalidURL, httpx.StreamError) as exc:
            return self._fail(operation, str(exc) or exc.__class__.__name__)
        if not response.content:
            return Ok(None)
        try:
            return Ok(response.json())
        except ValueError as exc:
            return self._fail(operation, f"invalid JSON in response: {exc}", response.status_code)

    def _parse(self, operation: str, model: Type[M], data: Any) -> Result[M]:
        if data is None:
            return self._fail(operation, "empty response body")
        try:
            return Ok(model.model_validate(data))
        except ValidationError as exc:
            return self._fail(operation, f"unexpected response shape: {exc.error_count()} error(s)")

    # ------------------------------------------------------------------
    # Proposal operations
    # ------------------------------------------------------------------
    async def list_proposals(self) -> Result[List[Proposal]]:
        """Retrieve every proposal.

        The server is expected to answer with a JSON array.  A dict
        wrapping the array under ``proposals``, ``data`` or ``items`` is
        accepted as well.
        """
        operation = "list_proposals"
        result = await self._request(operation, "GET")
        if result.is_err:
            return result
        data = result.value
        if isinstance(data, dict):
            for key in ("proposals", "data", "items"):
                if isinstance(data.get(key), list):
                    data = data[key]
                    break
        if not isinstance(data, list):
            return self._fail(operation, "expected a list of proposals")
        try:
            proposals = [Proposal.model_validate(item) for item in data]
        except ValidationError as exc:
            return self._fail(operation, f"unexpected response shape: {exc.error_count()} error(s)")
        logger.info("fetched proposals")
        return Ok(proposals)

    async def get_proposal(self, proposal_id: Union[str, int]) -> Result[Proposal]:
        """Retrieve one proposal, using the cache when the id matches."""
        key = str(proposal_id)
        cached = self.cache.get(key)
        if cached is not None:
            logger.debug("proposal id=%s served from cache", key)
            return Ok(cached)
        operation = f"get_proposal id={key}"
        result = await self._request(operation, "GET", _path(key))
        if result.is_err:
            return result
        parsed = self._parse(operation, Proposal, result.value)
        if parsed.is_ok:
            self.cache.set(key, parsed.value)
            logger.info("fetched proposal id=%s", key)
        return parsed

    async def add_proposal(
        self, name: str, activities: Iterable[Union[Activity, Dict[str, Any]]] = ()
    ) -> Result[Proposal]:
        """Create a proposal; the result carries the server-assigned id."""
        operation = "add_proposal"
        payload = {
            "name": name,
            "activities": [
                a.model_dump(exclude_none=True) if isinstance(a, BaseModel) else a
                for a in activities
            ],
        }
        result = await self._request(operation, "POST", json_body=payload)
        if result.is_err:
            return result
        parsed = self._parse(operation, Proposal, result.value)
        if parsed.is_ok:
            logger.info("added proposal w/ id=%s", parsed.value.id)
        return parsed

    async def delete_proposal(self, proposal_id: Union[str, int]) -> Result[bool]:
        """Delete a proposal.  Success is signalled by the status code alone."""
        key = str(proposal_id)
        result = await self._request(f"delete_proposal id={key}", "DELETE", _path(key))
        if result.is_err:
            return result
        logger.info("deleted proposal id=%s", key)
        return Ok(True)

    # ------------------------------------------------------------------
    # Activity operations
    # ------------------------------------------------------------------
    async def get_activity(self, proposal_id: Union[str, int], activity_id: int) -> Result[Activity]:
        """Retrieve one activity after resolving its parent proposal.

        If the parent cannot be resolved the activity is not requested.
        """
        key = str(proposal_id)
        parent = await self.get_proposal(key)
        if parent.is_err:
            return parent
        operation = f"get_activity id={activity_id} proposal={key}"
        result = await self._request(operation, "GET", _path(key, "activities", activity_id))
        if result.is_err:
            return result
        parsed = self._parse(operation, Activity, result.value)
        if parsed.is_ok:
            logger.info("fetched activity '%s' from proposal '%s'", activity_id, key)
        return parsed

    async def add_activity(self, proposal_id: Union[str, int], activity_id: int) -> Result[Activity]:
        """Attach an activity to a proposal.

        The request body is the bare activity id.  Nothing is posted
        when the parent proposal cannot be resolved.
        """
        key = str(proposal_id)
        parent = await self.get_proposal(key)
        if parent.is_err:
            return parent
        operation = f"add_activity id={activity_id} proposal={key}"
        result = await self._request(operation, "POST", _path(key, "activities"), json_body=activity_id)
        if result.is_err:
            return result
        parsed = self._parse(operation, Activity, result.value)
        if parsed.is_ok:
            logger.info("added activity to proposal: %s", activity_id)
        return parsed
