import pytest

from core.events.domain_events import domain_events
from core.exceptions import NotFoundError, ValidationError


def test_quote_round_trip_through_repository(services, quote_setup):
    qs = services["quote_service"]
    quote = qs.get_quote(quote_setup["quote"].id)

    assert quote.name == "Plant retrofit"
    assert quote.client_name == "ACME"
    assert quote.machine_type_ids == [quote_setup["lathe"].id, quote_setup["mill"].id]
    assert quote.software_type_ids == [quote_setup["cam"].id]
    assert quote.area_id == quote_setup["area"].id
    assert [q.id for q in qs.list_quotes()] == [quote.id]


def test_select_machines_deduplicates_and_keeps_order(services, quote_setup):
    qs = services["quote_service"]
    lathe, mill = quote_setup["lathe"].id, quote_setup["mill"].id

    quote = qs.select_machines(quote_setup["quote"].id, [mill, lathe, mill])
    assert quote.machine_type_ids == [mill, lathe]
    assert qs.get_quote(quote.id).machine_type_ids == [mill, lathe]


def test_selection_rejects_unknown_items(services, quote_setup):
    qs = services["quote_service"]
    with pytest.raises(NotFoundError) as exc:
        qs.select_software(quote_setup["quote"].id, [999])
    assert exc.value.code == "SOFTWARE_TYPE_NOT_FOUND"
    with pytest.raises(NotFoundError):
        qs.set_area(quote_setup["quote"].id, 999)


def test_quote_validation(services):
    qs = services["quote_service"]
    with pytest.raises(ValidationError):
        qs.create_quote("  ")
    with pytest.raises(ValidationError):
        qs.create_area_cost("South", daily_allowance=-1)
    with pytest.raises(NotFoundError) as exc:
        qs.get_quote("nope")
    assert exc.value.code == "QUOTE_NOT_FOUND"


def test_delete_quote_removes_selection(services, quote_setup):
    qs = services["quote_service"]
    qs.delete_quote(quote_setup["quote"].id)
    assert qs.list_quotes() == []


def test_quote_edits_emit_quote_changed(services, quote_setup):
    qs = services["quote_service"]
    quote_id = quote_setup["quote"].id
    seen: list[str] = []

    domain_events.quote_changed.connect(seen.append)
    try:
        qs.set_weekend_policy(quote_id, True, False)
        qs.select_machines(quote_id, [quote_setup["mill"].id])
        qs.set_area(quote_id, None)
    finally:
        domain_events.quote_changed.disconnect(seen.append)

    assert seen == [quote_id, quote_id, quote_id]
