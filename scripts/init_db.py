from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_admin.hr_admin.database.bootstrap import apply_schema, list_tables
from src.hr_admin.hr_admin.database.connection import DBConfig


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_mapping(dict(settings.DB_CONFIG))

    apply_schema(db, schema_path=REPO_ROOT / "database" / "schema.sql")
    tables = list_tables(db)
    print(f"OK: Applied schema.sql -> {db.describe()} (tables={len(tables)})")


if __name__ == "__main__":
    main()
