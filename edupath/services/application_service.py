"""
Application submission ledger.

Every application must reference an existing account at submission time.
Email matching here is exact (case-sensitive), unlike signup/login.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping

from edupath.domain.records import APPLICATION_REQUIRED_FIELDS, PENDING_STATUS, Application, utc_timestamp
from edupath.repositories.json_storage import CollectionStore
from edupath.services.account_service import AccountRegistry
from edupath.services.errors import ForbiddenError, InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass
class SubmitResult:
    application_id: int


class ApplicationLedger:
    """Records applications and answers per-applicant counts."""

    def __init__(self, store: CollectionStore[Application], accounts: AccountRegistry) -> None:
        self.store = store
        self.accounts = accounts

    def submit(self, fields: Mapping[str, Any], applicant_email: str | None) -> SubmitResult:
        if not isinstance(fields, Mapping) or any(not fields.get(key) for key in APPLICATION_REQUIRED_FIELDS):
            raise InvalidInputError("Missing required fields")
        account = self.accounts.find_by_email(applicant_email or "", case_sensitive=True)
        if not account:
            raise ForbiddenError("Unauthorized: User not found")

        with self.store.transaction() as applications:
            application = Application(
                id=self.store.next_id(applications),
                user_id=account.id,
                applicant_email=applicant_email,
                full_name=fields["fullName"],
                birth_date=fields["birthDate"],
                national_id=fields["nationalId"],
                address=fields["address"],
                phone_number=fields["phoneNumber"],
                college=fields["college"],
                total=fields.get("total"),
                payment_method=fields.get("paymentMethod"),
                status=PENDING_STATUS,
                submitted_at=utc_timestamp(),
            )
            applications.append(application)
        logger.info("Application %s submitted for account %s", application.id, account.id)
        return SubmitResult(application_id=application.id)

    def count_by_email(self, email: str | None) -> int:
        if not email:
            raise InvalidInputError("Email is required")
        return sum(1 for a in self.store.load() if a.applicant_email == email)

    def list_all(self) -> list[Application]:
        return self.store.load()

    def delete(self, application_id: int) -> None:
        with self.store.transaction() as applications:
            remaining = [a for a in applications if a.id != application_id]
            if len(remaining) == len(applications):
                raise NotFoundError("Not found")
            applications[:] = remaining
        logger.info("Deleted application %s", application_id)
