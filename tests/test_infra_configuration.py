import logging

from sqlalchemy import create_engine, inspect

from infra.db.base import DB_URL_ENV, database_url
from infra.logging_config import setup_logging
from infra.migrate import run_migrations
from infra.operational_support import bind_trace_id, current_trace_id
from infra.path import DATA_DIR_ENV, default_db_path, user_data_dir


def test_data_dir_and_db_url_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv(DATA_DIR_ENV, str(tmp_path / "data"))
    monkeypatch.delenv(DB_URL_ENV, raising=False)

    assert user_data_dir() == tmp_path / "data"
    assert default_db_path().name == "training_quotes.db"
    assert database_url().endswith("/data/training_quotes.db")

    monkeypatch.setenv(DB_URL_ENV, "sqlite:///:memory:")
    assert database_url() == "sqlite:///:memory:"


def test_migrations_create_schema(tmp_path):
    db_url = f"sqlite:///{(tmp_path / 'quotes.db').as_posix()}"
    run_migrations(db_url)

    tables = set(inspect(create_engine(db_url)).get_table_names())
    assert {
        "resources",
        "machine_types",
        "software_types",
        "training_plans",
        "training_offers",
        "training_requirements",
        "training_topics",
        "area_costs",
        "quotes",
        "quote_items",
        "alembic_version",
    } <= tables


def test_trace_id_is_scoped_to_block():
    assert current_trace_id() is None
    with bind_trace_id("trace-1") as outer:
        assert outer == "trace-1"
        with bind_trace_id(None) as generated:
            assert generated.startswith("trc-")
            assert current_trace_id() == generated
        assert current_trace_id() == "trace-1"
    assert current_trace_id() is None


def test_setup_logging_writes_trace_ids(tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    try:
        log_file = setup_logging(tmp_path)
        with bind_trace_id("sched-42"):
            logging.getLogger("tests.logging").info("schedule rebuilt")
        for handler in root.handlers:
            handler.flush()
        text = log_file.read_text(encoding="utf-8")
    finally:
        for handler in list(root.handlers):
            root.removeHandler(handler)
            handler.close()
        for handler in saved_handlers:
            root.addHandler(handler)
        root.setLevel(saved_level)

    assert "trace=sched-42 tests.logging - schedule rebuilt" in text
