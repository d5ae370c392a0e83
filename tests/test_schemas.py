import pytest
from pydantic import ValidationError

from proposal_planner.app.schemas.game import Game
from proposal_planner.app.schemas.proposal import Activity, Proposal, ProposalCreate


def test_proposal_defaults_and_extra_fields():
    proposal = Proposal.model_validate({"id": "1", "name": "Trip", "owner": "ana"})

    assert proposal.activities == []
    assert proposal.model_dump()["owner"] == "ana"


def test_numeric_proposal_id_becomes_string():
    assert Proposal.model_validate({"id": 12, "name": "Trip"}).id == "12"


def test_bool_is_not_treated_as_numeric_id():
    with pytest.raises(ValidationError):
        Proposal.model_validate({"id": True, "name": "Trip"})


def test_activity_id_is_numeric():
    assert Activity.model_validate({"id": "42"}).id == 42
    with pytest.raises(ValidationError):
        Activity.model_validate({"id": "hike"})


def test_proposal_create_strips_and_rejects_blank_name():
    assert ProposalCreate(name="  Trip ").name == "Trip"
    with pytest.raises(ValidationError):
        ProposalCreate(name="   ")


def test_game_owns_a_proposal():
    game = Game.model_validate(
        {"id": 3, "proposal": {"id": "1", "name": "Trip"}, "users": ["ana", "luis"]}
    )

    assert game.proposal.name == "Trip"
    assert game.users == ["ana", "luis"]
    assert game.active is False
