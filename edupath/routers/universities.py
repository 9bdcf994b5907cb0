from __future__ import annotations

from typing import Any, Optional

from fastapi import APIRouter, Body, Request

from edupath.services.institution_service import InstitutionCatalog

router = APIRouter(prefix="/api/universities", tags=["universities"])


def _get_catalog(request: Request) -> InstitutionCatalog:
    svc = getattr(getattr(request.app, "state", None), "institution_catalog", None)
    if not svc:
        raise RuntimeError("InstitutionCatalog nao configurado")
    return svc


@router.get("")
def list_universities(
    request: Request,
    q: Optional[str] = None,
    type: Optional[str] = None,
    college: Optional[str] = None,
):
    page = _get_catalog(request).query(name=q, type=type, college=college)
    return {"items": [i.to_dict() for i in page.items], "total": page.total}


@router.get("/{university_id}")
def get_university(university_id: int, request: Request):
    return _get_catalog(request).get(university_id).to_dict()


@router.post("", status_code=201)
def create_university(request: Request, payload: Any = Body(None)):
    return _get_catalog(request).create(payload).to_dict()


@router.put("/{university_id}")
def replace_university(university_id: int, request: Request, payload: Any = Body(None)):
    return _get_catalog(request).replace(university_id, payload).to_dict()


@router.delete("/{university_id}")
def delete_university(university_id: int, request: Request):
    _get_catalog(request).delete(university_id)
    return {"message": "Deleted successfully"}
