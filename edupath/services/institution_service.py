"""Institution catalog use cases (filtered listing and CRUD)."""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Any, Mapping, Optional

from edupath.domain.records import Institution
from edupath.repositories.json_storage import CollectionStore
from edupath.services.errors import InvalidInputError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass
class InstitutionPage:
    items: list[Institution]
    total: int


def _require_mapping(record: Any) -> Mapping[str, Any]:
    if not isinstance(record, Mapping):
        raise InvalidInputError("Institution body must be an object")
    return record


class InstitutionCatalog:
    """Stores universities; ids are assigned here, never taken from the caller."""

    def __init__(self, store: CollectionStore[Institution]) -> None:
        self.store = store

    def query(
        self,
        name: Optional[str] = None,
        type: Optional[str] = None,
        college: Optional[str] = None,
    ) -> InstitutionPage:
        """All filters are ANDed; ``name`` is a case-insensitive substring match."""
        items = self.store.load()
        if name:
            needle = name.lower()
            items = [i for i in items if needle in i.name.lower()]
        if type:
            items = [i for i in items if i.type == type]
        if college:
            items = [i for i in items if i.has_college(college)]
        return InstitutionPage(items=items, total=len(items))

    def get(self, institution_id: int) -> Institution:
        for item in self.store.load():
            if item.id == institution_id:
                return item
        raise NotFoundError("Not found")

    def create(self, record: Mapping[str, Any]) -> Institution:
        data = _require_mapping(record)
        with self.store.transaction() as items:
            institution = Institution.from_dict(data, force_id=self.store.next_id(items))
            items.append(institution)
        logger.info("Created institution %s (%s)", institution.id, institution.name)
        return institution

    def replace(self, institution_id: int, record: Mapping[str, Any]) -> Institution:
        data = _require_mapping(record)
        with self.store.transaction() as items:
            for index, item in enumerate(items):
                if item.id == institution_id:
                    institution = Institution.from_dict(data, force_id=institution_id)
                    items[index] = institution
                    break
            else:
                raise NotFoundError("University not found")
        logger.info("Replaced institution %s", institution_id)
        return institution

    def delete(self, institution_id: int) -> None:
        with self.store.transaction() as items:
            remaining = [i for i in items if i.id != institution_id]
            if len(remaining) == len(items):
                raise NotFoundError("Not found")
            items[:] = remaining
        logger.info("Deleted institution %s", institution_id)
