from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_admin.hr_admin.database.bootstrap import apply_seed_sql, ensure_demo_admin
from src.hr_admin.hr_admin.database.connection import DBConfig
from src.hr_admin.hr_admin.security.hashing import build_hasher


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db = DBConfig.from_mapping(dict(settings.DB_CONFIG))

    apply_seed_sql(db, seed_path=REPO_ROOT / "database" / "seed.sql")
    ensure_demo_admin(db, hasher=build_hasher(getattr(settings, "PASSWORD_HASHER", "legacy")))

    print(f"OK: Seeded database -> {db.describe()}")


if __name__ == "__main__":
    main()
