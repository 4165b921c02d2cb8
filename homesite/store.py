"""
Store capability interface over the request-scoped SQLAlchemy session.

Resolvers only talk to the database through these four calls, so a missing
record surfaces as ``NotFound`` and anything else as ``StoreError``.
"""

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from .errors import NotFound, StoreError
from .models import db


class Store:
    def __init__(self, session=None):
        self.session = session if session is not None else db.session

    def get(self, model, key):
        """Point lookup by primary key."""
        try:
            record = self.session.get(model, key)
        except SQLAlchemyError as e:
            raise StoreError(f"get {model.__tablename__} {key!r}", e) from e
        if record is None:
            raise NotFound(f"no {model.__tablename__} with key {key!r}")
        return record

    def put(self, record):
        """Insert or update a single record and commit."""
        try:
            self.session.add(record)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"put {record.__tablename__}", e) from e
        return record

    def delete(self, *records):
        """Delete records in one commit."""
        try:
            for record in records:
                self.session.delete(record)
            self.session.commit()
        except SQLAlchemyError as e:
            self.session.rollback()
            raise StoreError(f"delete {records[0].__tablename__}", e) from e

    def query_equal(self, model, field, value, limit=None):
        """Records whose ``field`` equals ``value``, in store order."""
        stmt = select(model).where(getattr(model, field) == value)
        if limit is not None:
            stmt = stmt.limit(limit)
        try:
            return self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise StoreError(f"query {model.__tablename__} {field}={value!r}", e) from e

    def query_all(self, model, order_by):
        """Every record of ``model`` ordered by ``order_by`` ascending."""
        stmt = select(model).order_by(getattr(model, order_by))
        try:
            return self.session.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise StoreError(f"query {model.__tablename__} by {order_by}", e) from e
