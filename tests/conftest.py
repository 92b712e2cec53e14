# tests/conftest.py
import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core.models import ItemKind
from core.services.scheduling import TrainingRequirement
from infra.db.base import Base
import infra.db.models  # noqa: F401
from infra.services import build_service_dict


@pytest.fixture
def session():
    # separate in-memory DB for tests
    engine = create_engine("sqlite:///:memory:", future=True)
    TestingSessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def services(session):
    return build_service_dict(session)


@pytest.fixture
def make_requirement():
    def _make(resource_id, hours, item_id=1, plan_id=1, kind=ItemKind.MACHINE, resource_name=""):
        return TrainingRequirement(
            resource_id=resource_id,
            item_id=item_id,
            item_kind=kind,
            plan_id=plan_id,
            hours_required=hours,
            item_name=f"{kind.value}-{item_id}",
            resource_name=resource_name or (f"R{resource_id}" if resource_id is not None else ""),
        )

    return _make


@pytest.fixture
def quote_setup(services):
    """
    One quote with two machines and one software in plan 1:
    - Lathe (machine 1): Alice 16h
    - Mill (machine 2): Alice 8h, Bob 8h
    - CAM (software): Bob, no offer -> default hours
    """
    cs = services["catalog_service"]
    qs = services["quote_service"]
    rs = services["resource_service"]

    alice = rs.create_resource("Alice", hourly_rate=50.0)
    bob = rs.create_resource("Bob", hourly_rate=40.0)
    plan = cs.create_plan("Standard", plan_id=1)
    lathe = cs.create_machine_type("Lathe")
    mill = cs.create_machine_type("Mill")
    cam = cs.create_software_type("CAM")

    cs.set_training_offer(plan.id, ItemKind.MACHINE, lathe.id, 16)
    cs.set_training_offer(plan.id, ItemKind.MACHINE, mill.id, 8)
    cs.add_requirement(ItemKind.MACHINE, lathe.id, plan.id, alice.id)
    cs.add_requirement(ItemKind.MACHINE, mill.id, plan.id, alice.id)
    cs.add_requirement(ItemKind.MACHINE, mill.id, plan.id, bob.id)
    cs.add_requirement(ItemKind.SOFTWARE, cam.id, plan.id, bob.id)

    area = qs.create_area_cost("North", daily_accommodation_food_cost=100.0, daily_allowance=20.0, daily_pocket_money=5.0)
    quote = qs.create_quote("Plant retrofit", client_name="ACME", area_id=area.id)
    qs.select_machines(quote.id, [lathe.id, mill.id])
    qs.select_software(quote.id, [cam.id])

    return {
        "quote": quote,
        "plan": plan,
        "alice": alice,
        "bob": bob,
        "lathe": lathe,
        "mill": mill,
        "cam": cam,
        "area": area,
    }
