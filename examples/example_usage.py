"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; logging in and listing products both go
through the services held by the container.
"""

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
for path in (REPO_ROOT, REPO_ROOT / "src" / "product_catalog"):
    if str(path) not in sys.path:
        sys.path.insert(0, str(path))

from config import get_settings_module

from product_catalog.common.paging import Pageable
from product_catalog.container import build_container
from product_catalog.main import build_jwt_generator
from product_catalog.users.dto import UserDTO


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, jwt_generator=build_jwt_generator(settings))

    auth = container.authentication_service.authenticate_user(UserDTO("john", "john123"))
    print("token:", auth.access_token[:24], "...")

    page = container.product_service.get_all_products(Pageable(page=0, size=5))
    for product in page.content:
        print(product.to_dict())


if __name__ == "__main__":
    main()
