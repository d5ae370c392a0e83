import pytest

from proposal_planner.app.core.result import Err, Ok, TransportError, TransportFailure


def test_ok():
    result = Ok([1, 2])

    assert result.is_ok and not result.is_err
    assert result.unwrap() == [1, 2]
    assert result.unwrap_or([]) == [1, 2]


def test_ok_holding_falsy_value_is_still_ok():
    assert Ok([]).unwrap_or(None) == []


def test_err_substitutes_default_or_raises():
    failure = TransportFailure(operation="get_proposal id=1", message="Proposal not found", status_code=404)
    result = Err(failure)

    assert result.is_err and not result.is_ok
    assert result.unwrap_or(False) is False
    with pytest.raises(TransportError) as excinfo:
        result.unwrap()
    assert excinfo.value.failure is failure
    assert str(excinfo.value) == "get_proposal id=1 failed (404): Proposal not found"


def test_failure_as_dict():
    failure = TransportFailure(operation="list_proposals", message="timed out")

    assert failure.as_dict() == {"operation": "list_proposals", "status_code": None, "message": "timed out"}
