from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional, Sequence

import pytest
from werkzeug.security import generate_password_hash

from product_catalog.common.paging import Page, Pageable
from product_catalog.container import assemble
from product_catalog.core.enums import Role
from product_catalog.main import create_app
from product_catalog.products.model import COLUMNS, Product
from product_catalog.security.jwt_generator import JwtGenerator
from product_catalog.users.dto import UserDTO
from product_catalog.users.model import User

JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789"


class InMemoryUsers:
    def __init__(self, users: Sequence[User] = ()):
        self._by_username: dict[str, User] = {u.username: u for u in users}
        self._next_id = len(self._by_username) + 1

    def get_by_username(self, username: str) -> Optional[User]:
        return self._by_username.get(username)

    def exists_by_username(self, username: str) -> bool:
        return username in self._by_username

    def create_user(self, *, username: str, password_hash: str, role: Role) -> int:
        user_id = self._next_id
        self._next_id += 1
        self._by_username[username] = User(
            user_id=user_id,
            username=username,
            password_hash=password_hash,
            role=role,
        )
        return user_id


class InMemoryProducts:
    def __init__(self, products: Sequence[Product] = (), *, fail_with: Optional[Exception] = None):
        self.saved: list[Product] = list(products)
        self.fail_with = fail_with

    def save_all(self, products: Sequence[Product]) -> int:
        if self.fail_with:
            raise self.fail_with
        self.saved.extend(products)
        return len(products)

    def find_page(self, pageable: Pageable) -> Page[Product]:
        if self.fail_with:
            raise self.fail_with
        items = list(self.saved)
        if pageable.sort:
            attr = COLUMNS[pageable.sort.prop]
            items.sort(key=lambda p: getattr(p, attr), reverse=not pageable.sort.ascending)
        content = items[pageable.offset:pageable.offset + pageable.size]
        return Page(content=content, pageable=pageable, total_elements=len(items))


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 1, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def john() -> User:
    return User(
        user_id=1,
        username="john",
        password_hash=generate_password_hash("123"),
        role=Role.ROLE_USER,
    )


@pytest.fixture
def product_list() -> list[Product]:
    return [
        Product(1, date(2023, 1, 3), "11111", "Fina Lika", 30, "Paid"),
        Product(2, date(2023, 1, 3), "11111", "Test Inventory 2", 20, "Paid"),
    ]


@pytest.fixture
def jwt_generator() -> JwtGenerator:
    return JwtGenerator(JWT_SECRET, expiration_seconds=600)


@pytest.fixture
def users_repo(john) -> InMemoryUsers:
    return InMemoryUsers([john])


@pytest.fixture
def products_repo() -> InMemoryProducts:
    return InMemoryProducts()


@pytest.fixture
def container(users_repo, products_repo, jwt_generator):
    return assemble(users_repo=users_repo, products_repo=products_repo, jwt_generator=jwt_generator)


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def token(container) -> str:
    return container.authentication_service.authenticate_user(UserDTO("john", "123")).access_token


@pytest.fixture
def auth_headers(token) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def jwt_secret() -> str:
    return JWT_SECRET


@pytest.fixture
def make_client(users_repo, jwt_generator):
    """Client over a products store holding ``products`` or failing with ``fail_with``."""

    def _make(products: Sequence[Product] = (), *, fail_with: Optional[Exception] = None):
        store = InMemoryProducts(products, fail_with=fail_with)
        container = assemble(users_repo=users_repo, products_repo=store, jwt_generator=jwt_generator)
        return create_app(container, settings_module="config.testing").test_client()

    return _make
