# caseorder/store.py
from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Any, Dict, Generic, Iterator, List, Mapping, Type, TypeVar

from sqlalchemy import select, delete as sqldelete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .database import Base
from .errors import Outcome, NOT_FOUND, NOTHING_TO_DELETE, PersistenceError

"""Repository layer: one instance per entity, bound to an injected session.

Every method is one unit of work against the store. "No such row" comes back
as an Outcome sentinel; only store failures raise (as PersistenceError).
"""

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=Base)

# columns the store fills in itself
_GENERATED = {"created_at"}


class Repository(Generic[M]):

    def __init__(self, session: Session, model: Type[M]):
        self.session = session
        self.model = model
        self.entity = model.__name__
        self._pk = getattr(model, model.__mapper__.primary_key[0].key)
        self._fields = [
            c.key for c in model.__table__.columns
            if c.key != self._pk.key and c.key not in _GENERATED
        ]

    @property
    def fields(self) -> List[str]:
        """Caller-writable columns (identifier and generated columns excluded)."""
        return list(self._fields)

    @contextmanager
    def _guard(self, operation: str) -> Iterator[None]:
        try:
            yield
        except (SQLAlchemyError, OverflowError) as e:
            # OverflowError: driver could not bind an integer wider than the column
            self.session.rollback()
            logger.error("store failure: %s on %s: %s", operation, self.entity, e)
            raise PersistenceError(operation, self.entity) from e

    def _writable(self, values: Mapping[str, Any]) -> Dict[str, Any]:
        return {k: values.get(k) for k in self._fields if k in values}

    # ---------------- reads ----------------
    def list_all(self) -> List[M]:
        with self._guard("list"):
            rows = self.session.execute(select(self.model).order_by(self._pk)).scalars().all()
            return list(rows)

    # ---------------- writes ----------------
    def create(self, values: Mapping[str, Any]) -> M:
        with self._guard("create"):
            obj = self.model(**self._writable(values))
            self.session.add(obj); self.session.commit(); self.session.refresh(obj)
            return obj

    def update(self, pk: int, values: Mapping[str, Any]) -> M | Outcome:
        """Overwrite every writable field of row `pk`.

        The lookup locks the row (FOR UPDATE where the dialect supports it) so
        a concurrent delete cannot slip in between lookup and write.
        """
        with self._guard("update"):
            obj = self.session.get(self.model, int(pk), with_for_update=True)
            if obj is None:
                self.session.rollback()
                return NOT_FOUND
            for key in self._fields:
                setattr(obj, key, values.get(key))
            self.session.add(obj); self.session.commit(); self.session.refresh(obj)
            return obj

    def delete_one(self, pk: int) -> bool | Outcome:
        with self._guard("delete"):
            result = self.session.execute(
                sqldelete(self.model)
                .where(self._pk == int(pk))
                .execution_options(synchronize_session="evaluate")
            )
            self.session.commit()
        if not result.rowcount:
            return NOT_FOUND
        return True

    def delete_all(self) -> int | Outcome:
        """Remove every row. An already empty table is NOTHING_TO_DELETE, not success."""
        with self._guard("delete_all"):
            result = self.session.execute(
                sqldelete(self.model).execution_options(synchronize_session="evaluate")
            )
            self.session.commit()
        if not result.rowcount:
            return NOTHING_TO_DELETE
        logger.info("deleted %d %s rows", result.rowcount, self.entity)
        return result.rowcount
