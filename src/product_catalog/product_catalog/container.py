from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DatabaseConnection, DBConfig
from .products.mysql_product_repository import MySQLProductRepository
from .products.repository import ProductRepository
from .products.service import ProductService
from .security.jwt_generator import JwtGenerator
from .security.provider import AuthenticationProvider
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthenticationService, UserDetailsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    users_repo: UserRepository
    products_repo: ProductRepository

    jwt_generator: JwtGenerator
    user_details_service: UserDetailsService
    authentication_provider: AuthenticationProvider
    authentication_service: AuthenticationService
    product_service: ProductService


def assemble(
    *,
    users_repo: UserRepository,
    products_repo: ProductRepository,
    jwt_generator: JwtGenerator,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Wire services around the given repositories (tests pass in-memory ones)."""
    user_details_service = UserDetailsService(users_repo)
    authentication_provider = AuthenticationProvider(user_details_service)

    return Container(
        conn=conn,
        users_repo=users_repo,
        products_repo=products_repo,
        jwt_generator=jwt_generator,
        user_details_service=user_details_service,
        authentication_provider=authentication_provider,
        authentication_service=AuthenticationService(users_repo, authentication_provider, jwt_generator),
        product_service=ProductService(products_repo),
    )


def build_container(*, db_config: dict, jwt_generator: JwtGenerator) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_mapping(db_config))
    return assemble(
        users_repo=MySQLUserRepository(conn),
        products_repo=MySQLProductRepository(conn),
        jwt_generator=jwt_generator,
        conn=conn,
    )
