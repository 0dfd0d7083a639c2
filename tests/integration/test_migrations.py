"""
Integration test: the Alembic migration creates the products table the ORM expects
"""
import warnings
from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect

from app.core.db import Database
from app.services.seed_service import run_seed

ROOT = Path(__file__).resolve().parents[2]


def _alembic_config(url: str) -> Config:
    config = Config(str(ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(ROOT / "alembic"))
    config.set_main_option("sqlalchemy.url", url)
    config.attributes["configure_logger"] = False
    return config


def test_upgrade_creates_products_table(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"

    command.upgrade(_alembic_config(url), "head")

    engine = create_engine(url)
    try:
        columns = {c["name"] for c in inspect(engine).get_columns("products")}
    finally:
        engine.dispose()
    assert columns == {"id", "name", "price", "description", "quantity"}


def test_seed_runs_against_migrated_schema(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"
    command.upgrade(_alembic_config(url), "head")

    assert run_seed(Database(url)) == 0


def test_upgrade_emits_no_sys_path_deprecation(tmp_path):
    url = f"sqlite:///{tmp_path / 'migrated.db'}"

    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        command.upgrade(_alembic_config(url), "head")

    assert not [w for w in caught if "path_separator" in str(w.message)]
