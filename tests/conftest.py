from __future__ import annotations

import sys
from pathlib import Path

import pytest
from argon2 import PasswordHasher

# Garante que o pacote edupath seja importável durante os testes locais
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from edupath.core.config import Settings  # noqa: E402
from edupath.core.security import CredentialHasher  # noqa: E402
from edupath.domain.records import Account, Application, Institution  # noqa: E402
from edupath.repositories.json_storage import CollectionStore  # noqa: E402
from edupath.services.account_service import AccountRegistry  # noqa: E402
from edupath.services.application_service import ApplicationLedger  # noqa: E402
from edupath.services.institution_service import InstitutionCatalog  # noqa: E402


@pytest.fixture()
def hasher() -> CredentialHasher:
    """Argon2 com custo minimo para manter os testes rapidos."""
    return CredentialHasher(PasswordHasher(time_cost=1, memory_cost=8, parallelism=1))


@pytest.fixture()
def settings(tmp_path) -> Settings:
    return Settings(
        app_env="test",
        data_dir=tmp_path,
        accounts_file=tmp_path / "accounts.json",
        universities_file=tmp_path / "universities.json",
        applications_file=tmp_path / "applications.json",
        log_level="WARNING",
        cors_origins=("*",),
    )


@pytest.fixture()
def account_store(settings) -> CollectionStore[Account]:
    return CollectionStore(settings.accounts_file, Account.from_dict, Account.to_dict, envelope="users")


@pytest.fixture()
def university_store(settings) -> CollectionStore[Institution]:
    return CollectionStore(settings.universities_file, Institution.from_dict, Institution.to_dict, envelope="items")


@pytest.fixture()
def application_store(settings) -> CollectionStore[Application]:
    return CollectionStore(settings.applications_file, Application.from_dict, Application.to_dict)


@pytest.fixture()
def registry(account_store, hasher) -> AccountRegistry:
    return AccountRegistry(account_store, hasher)


@pytest.fixture()
def catalog(university_store) -> InstitutionCatalog:
    return InstitutionCatalog(university_store)


@pytest.fixture()
def ledger(application_store, registry) -> ApplicationLedger:
    return ApplicationLedger(application_store, registry)


@pytest.fixture()
def application_fields() -> dict:
    return {
        "fullName": "Ana Souza",
        "birthDate": "2001-04-12",
        "nationalId": "29801011234567",
        "address": "12 Nile St, Cairo",
        "phoneNumber": "+201000000000",
        "total": 250,
        "paymentMethod": "card",
        "college": "Engineering",
    }
