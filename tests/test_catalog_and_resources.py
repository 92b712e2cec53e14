import pytest

from core.exceptions import BusinessRuleError, NotFoundError, ValidationError
from core.models import ItemKind


def test_resource_crud_and_validation(services):
    rs = services["resource_service"]

    r = rs.create_resource("  Carla ", hourly_rate=65.0)
    assert r.id is not None
    assert r.name == "Carla"

    updated = rs.update_resource(r.id, hourly_rate=70.0, is_active=False)
    assert updated.hourly_rate == 70.0
    assert rs.get_resource(r.id).is_active is False

    with pytest.raises(ValidationError):
        rs.create_resource("   ")
    with pytest.raises(ValidationError):
        rs.update_resource(r.id, hourly_rate=-1)

    rs.delete_resource(r.id)
    with pytest.raises(NotFoundError) as exc:
        rs.get_resource(r.id)
    assert exc.value.code == "RESOURCE_NOT_FOUND"


def test_training_offer_is_upserted_per_plan_and_item(services):
    cs = services["catalog_service"]
    plan = cs.create_plan("Standard")
    machine = cs.create_machine_type("Press brake")

    first = cs.set_training_offer(plan.id, ItemKind.MACHINE, machine.id, 12)
    second = cs.set_training_offer(plan.id, ItemKind.MACHINE, machine.id, 20)

    assert first.id == second.id
    offers = cs.list_offers(plan.id)
    assert len(offers) == 1
    assert offers[0].hours_required == 20

    with pytest.raises(ValidationError):
        cs.set_training_offer(plan.id, ItemKind.MACHINE, machine.id, -4)
    with pytest.raises(NotFoundError):
        cs.set_training_offer(plan.id, ItemKind.SOFTWARE, 999, 4)


def test_plan_ids_are_unique(services):
    cs = services["catalog_service"]
    cs.create_plan("Standard", plan_id=1)
    with pytest.raises(BusinessRuleError) as exc:
        cs.create_plan("Other", plan_id=1)
    assert exc.value.code == "PLAN_EXISTS"


def test_requirement_links_validate_references(services):
    cs = services["catalog_service"]
    plan = cs.create_plan("Standard")
    machine = cs.create_machine_type("Laser")

    with pytest.raises(NotFoundError):
        cs.add_requirement(ItemKind.MACHINE, machine.id, plan.id, resource_id=42)
    with pytest.raises(NotFoundError):
        cs.add_requirement(ItemKind.MACHINE, machine.id, 999)

    link = cs.add_requirement(ItemKind.MACHINE, machine.id, plan.id)
    assert link.resource_id is None

    resource = services["resource_service"].create_resource("Dan")
    cs.assign_resource(link.id, resource.id)
    assert cs.list_requirements(ItemKind.MACHINE, machine.id)[0].resource_id == resource.id

    cs.remove_requirement(link.id)
    assert cs.list_requirements(ItemKind.MACHINE, machine.id) == []


def test_deleting_resource_unassigns_its_requirements(services, quote_setup):
    services["resource_service"].delete_resource(quote_setup["bob"].id)

    links = services["catalog_service"].list_requirements(ItemKind.MACHINE, quote_setup["mill"].id)
    assert [link.resource_id for link in links] == [quote_setup["alice"].id, None]

    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id)
    assert [r.resource_name for r in schedule.gantt_by_plan[1].resources] == ["Alice"]


def test_deleting_machine_drops_offers_and_links(services, quote_setup):
    cs = services["catalog_service"]
    cs.delete_machine_type(quote_setup["lathe"].id)

    assert cs.list_requirements(ItemKind.MACHINE, quote_setup["lathe"].id) == []
    assert all(o.item_id != quote_setup["lathe"].id for o in cs.list_offers(1) if o.item_kind == ItemKind.MACHINE)

    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id)
    assert schedule.hours_by_plan[1] == 18


def test_deleting_plan_removes_its_requirements(services, quote_setup):
    services["catalog_service"].delete_plan(1)

    schedule = services["schedule_service"].build_quote_schedule(quote_setup["quote"].id)
    assert schedule.gantt_by_plan == {}
