from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Request

from edupath.services.application_service import ApplicationLedger

router = APIRouter(prefix="/api", tags=["applications"])


def _get_ledger(request: Request) -> ApplicationLedger:
    svc = getattr(getattr(request.app, "state", None), "application_ledger", None)
    if not svc:
        raise RuntimeError("ApplicationLedger nao configurado")
    return svc


@router.post("/apply", status_code=201)
def apply(request: Request, payload: dict[str, Any] | None = Body(None)):
    data = payload or {}
    result = _get_ledger(request).submit(data, data.get("email"))
    return {"message": "Application submitted successfully", "applicationId": result.application_id}


@router.get("/applications/count")
def count_applications(request: Request, email: Optional[str] = None):
    return {"count": _get_ledger(request).count_by_email(email)}


@router.get("/applications")
def list_applications(request: Request):
    return [a.to_dict() for a in _get_ledger(request).list_all()]


@router.delete("/applications/{application_id}")
def delete_application(application_id: int, request: Request):
    _get_ledger(request).delete(application_id)
    return {"message": "Deleted successfully"}
