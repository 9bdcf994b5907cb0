"""Record types persisted by the EduPath stores.

Key names in ``to_dict`` match the JSON files written by the previous Node
service (camelCase), so existing data loads unchanged.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

PENDING_STATUS = "Pending"

APPLICATION_REQUIRED_FIELDS = ("fullName", "birthDate", "nationalId", "address", "phoneNumber", "college")


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC with milliseconds and a ``Z`` suffix (2024-05-01T12:00:00.000Z)."""
    moment = (now or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass
class AccountSummary:
    id: str
    name: str
    email: str

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email}


@dataclass
class Account:
    id: str
    name: str
    email: str
    password_hash: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Account":
        return cls(
            id=str(data["id"]),
            name=str(data.get("name") or ""),
            email=str(data["email"]),
            password_hash=str(data.get("passwordHash") or ""),
        )

    def to_dict(self) -> dict:
        return {"id": self.id, "name": self.name, "email": self.email, "passwordHash": self.password_hash}

    def summary(self) -> AccountSummary:
        return AccountSummary(id=self.id, name=self.name, email=self.email)


@dataclass
class Institution:
    """A university record; ``body`` is kept exactly as the caller sent it, minus ``id``."""

    id: int
    body: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, force_id: int | None = None) -> "Institution":
        body = {k: v for k, v in data.items() if k != "id"}
        return cls(id=int(data["id"]) if force_id is None else force_id, body=body)

    def to_dict(self) -> dict:
        return {"id": self.id, **self.body}

    @property
    def name(self) -> str:
        value = self.body.get("name")
        return value if isinstance(value, str) else ""

    @property
    def type(self) -> Any:
        return self.body.get("type")

    @property
    def colleges(self) -> list:
        value = self.body.get("colleges")
        return value if isinstance(value, list) else []

    def has_college(self, college_name: str) -> bool:
        return any(isinstance(c, Mapping) and c.get("name") == college_name for c in self.colleges)


@dataclass
class Application:
    id: int
    user_id: str
    applicant_email: str
    full_name: str
    birth_date: str
    national_id: str
    address: str
    phone_number: str
    college: str
    total: Any = None
    payment_method: Any = None
    status: str = PENDING_STATUS
    submitted_at: str = ""

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Application":
        return cls(
            id=int(data["id"]),
            user_id=str(data.get("userId") or ""),
            applicant_email=str(data.get("applicantEmail") or ""),
            full_name=data.get("fullName") or "",
            birth_date=data.get("birthDate") or "",
            national_id=data.get("nationalId") or "",
            address=data.get("address") or "",
            phone_number=data.get("phoneNumber") or "",
            college=data.get("college") or "",
            total=data.get("total"),
            payment_method=data.get("paymentMethod"),
            status=data.get("status") or PENDING_STATUS,
            submitted_at=data.get("submittedAt") or "",
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "fullName": self.full_name,
            "birthDate": self.birth_date,
            "nationalId": self.national_id,
            "address": self.address,
            "phoneNumber": self.phone_number,
            "total": self.total,
            "paymentMethod": self.payment_method,
            "applicantEmail": self.applicant_email,
            "college": self.college,
            "status": self.status,
            "submittedAt": self.submitted_at,
        }
