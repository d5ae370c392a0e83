"""The lenient service never raises and falls back to plain defaults."""


async def test_list_defaults_to_empty_list(api, service):
    api.fail_status = 500

    assert await service.list_proposals() == []


async def test_list_passes_through_on_success(api, service):
    api.add("1", "Trip")

    proposals = await service.list_proposals()

    assert [(p.id, p.name) for p in proposals] == [("1", "Trip")]


async def test_delete_defaults_to_false(api, service):
    api.network_down = True

    assert await service.delete_proposal("1") is False


async def test_delete_true_on_success(api, service):
    api.add("1", "Trip")

    assert await service.delete_proposal("1") is True


async def test_single_item_operations_default_to_none(api, service):
    assert await service.get_proposal("1") is None
    assert await service.get_activity("1", 42) is None
    assert await service.add_activity("1", 42) is None
    api.fail_status = 500
    assert await service.add_proposal("Trip", []) is None


async def test_add_then_fetch(api, service):
    created = await service.add_proposal("Trip", [{"id": 1}])
    fetched = await service.get_proposal(created.id)
    activity = await service.add_activity(created.id, 2)

    assert fetched == created
    assert activity.id == 2
    assert (await service.get_activity(created.id, 2)).id == 2
