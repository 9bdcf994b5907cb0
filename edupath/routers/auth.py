from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Body, Request

from edupath.services.account_service import AccountRegistry

router = APIRouter(prefix="/api", tags=["auth"])


def _get_account_registry(request: Request) -> AccountRegistry:
    svc = getattr(getattr(request.app, "state", None), "account_registry", None)
    if not svc:
        raise RuntimeError("AccountRegistry nao configurado")
    return svc


@router.post("/signup", status_code=201)
def signup(request: Request, payload: dict[str, Any] | None = Body(None)):
    data = payload or {}
    summary = _get_account_registry(request).signup(data.get("name"), data.get("email"), data.get("password"))
    return summary.to_dict()


@router.post("/login")
def login(request: Request, payload: dict[str, Any] | None = Body(None)):
    data = payload or {}
    # sessao/JWT fora do escopo: devolve apenas o perfil
    summary = _get_account_registry(request).login(data.get("email"), data.get("password"))
    return summary.to_dict()


@router.get("/accounts")
def list_accounts(request: Request):
    accounts = _get_account_registry(request).list_all()
    return {"users": [a.to_dict() for a in accounts]}
