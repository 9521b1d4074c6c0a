from __future__ import annotations

import importlib
from types import SimpleNamespace

import pytest

from config import get_settings_module
from product_catalog.core.enums import Role
from product_catalog.main import build_jwt_generator, create_app


@pytest.mark.parametrize(
    "env, module",
    [("production", "config.production"), ("test", "config.testing"), ("anything", "config.development")],
)
def test_settings_module_follows_app_env(monkeypatch, env, module):
    monkeypatch.setenv("APP_ENV", env)

    assert get_settings_module() == module


def test_production_without_jwt_secret_refuses_to_start(monkeypatch):
    monkeypatch.delenv("JWT_SECRET", raising=False)
    import config.production as production

    settings = importlib.reload(production)

    assert settings.JWT_SECRET == ""
    with pytest.raises(ValueError, match="JWT secret"):
        build_jwt_generator(settings)
    with pytest.raises(ValueError, match="JWT secret"):
        create_app(settings_module="config.production")


def test_production_uses_secret_from_environment(monkeypatch):
    secret = "prod-secret-from-env-0123456789abcdef0123"
    monkeypatch.setenv("JWT_SECRET", secret)
    import config.production as production

    generator = build_jwt_generator(importlib.reload(production))

    assert generator.get_claims(generator.generate_token("john", Role.ROLE_USER)).username == "john"


def test_short_secret_is_rejected():
    settings = SimpleNamespace(JWT_SECRET="please-set-JWT_SECRET")

    with pytest.raises(ValueError, match="at least 32 bytes"):
        build_jwt_generator(settings)
