from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "product_catalog"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from product_catalog.database.bootstrap import DEMO_USERS, ensure_demo_users


def main() -> None:
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    ensure_demo_users(db_config)

    print(
        "OK: Seeded demo users "
        f"({', '.join(f'{u}/{p}' for u, p, _ in DEMO_USERS)}) -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')}"
    )


if __name__ == "__main__":
    main()
