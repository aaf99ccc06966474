import logging
from contextlib import contextmanager

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from observer.database import session_scope
from observer.models.schema.db_config import Databases
from observer.services.errors import DuplicateRecord, StoreFailure

LOGGER = logging.getLogger(__name__)


@contextmanager
def _store_errors(action: str, db: str):
    try:
        yield
    except IntegrityError as exc:
        LOGGER.warning("%s on %s rejected by constraint: %s", action, db, exc.orig)
        raise DuplicateRecord(f"{action} on {db} violated a constraint") from exc
    except SQLAlchemyError as exc:
        LOGGER.error("%s on %s failed: %s", action, db, exc)
        raise StoreFailure(f"{action} on {db} failed: {exc}") from exc


def _conditions(model, filters: dict) -> list:
    conditions = []
    for field, value in filters.items():
        if not hasattr(model, field):
            raise ValueError(f"{model.__name__} has no column '{field}'")
        column = getattr(model, field)
        if value is None:
            conditions.append(column.is_(None))
        else:
            conditions.append(column == value)
    return conditions


def _add_record(db: str, **kwargs):
    model = getattr(Databases, db)

    instance = model(**kwargs)

    with _store_errors("insert", db):
        with session_scope() as session:
            session.add(instance)
            session.flush()
    return instance


def _select_records(db: str, *, order_by=None, **kwargs):
    model = getattr(Databases, db)

    stmt = select(model).where(*_conditions(model, kwargs))

    if order_by is not None:
        stmt = stmt.order_by(getattr(model, order_by))

    with _store_errors("find", db):
        with session_scope() as session:
            return session.execute(stmt).scalars().all()


def _select_one_or_none(db: str, **kwargs):
    model = getattr(Databases, db)

    with _store_errors("findOne", db):
        with session_scope() as session:
            return session.execute(
                select(model).where(*_conditions(model, kwargs))
            ).scalar_one_or_none()


def _find_and_modify(db: str, *, values: dict, **filters):
    """Apply ``values`` to the single record matching ``filters``.

    Returns the record as stored after the change, or None when nothing
    matched.
    """
    model = getattr(Databases, db)

    for field in values:
        if not hasattr(model, field):
            raise ValueError(f"{model.__name__} has no column '{field}'")

    with _store_errors("findAndModify", db):
        with session_scope() as session:
            entry = session.execute(
                select(model).where(*_conditions(model, filters))
            ).scalar_one_or_none()
            if entry is None:
                return None
            for field, value in values.items():
                setattr(entry, field, value)
            session.flush()
            return entry
