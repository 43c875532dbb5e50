"""
Record Store - persistence wrapper over the SQLAlchemy session.

Exposes exactly the operations the API needs so that handlers never touch
``db.session`` directly.
"""
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError

from models import db, Record


class RecordStore:
    """Insert / lookup / list over the ``records`` table."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        # Resolved lazily: db.session is only usable inside an app context
        return self._session if self._session is not None else db.session

    def insert(self, name: str, surname: str, age: int, phone_number: str) -> Record:
        """
        Persist a new record and return it with its assigned identifier.

        Storage errors are re-raised after rolling the session back.
        """
        record = Record(name=name, surname=surname, age=age, phone_number=phone_number)
        try:
            self.session.add(record)
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        return record

    def find_by_id(self, record_id: int) -> Optional[Record]:
        return self.session.get(Record, record_id)

    def list_all(self) -> List[Record]:
        # No ORDER BY: exports follow the store's natural retrieval order
        return self.session.execute(db.select(Record)).scalars().all()
