"""Record stores for patient records.

``PatientRecordRepository`` is the contract the service depends on. The
SQLAlchemy implementation backs the running application; the in-memory
implementation keeps the service testable without a database.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.patient_record import MAX_PATIENT_ID, PatientRecord


class PatientRecordRepository(ABC):
    @abstractmethod
    async def find_all(self) -> list[PatientRecord]:
        ...

    @abstractmethod
    async def find_by_id(self, patient_id: int) -> Optional[PatientRecord]:
        ...

    @abstractmethod
    async def save(self, record: PatientRecord) -> PatientRecord:
        """Insert when ``patient_id`` is None, otherwise overwrite the stored row."""

    @abstractmethod
    async def delete_by_id(self, patient_id: int) -> None:
        ...


class SqlAlchemyPatientRecordRepository(PatientRecordRepository):
    def __init__(self, db: AsyncSession):
        self.db = db

    async def find_all(self) -> list[PatientRecord]:
        result = await self.db.execute(select(PatientRecord))
        return list(result.scalars().all())

    async def find_by_id(self, patient_id: int) -> Optional[PatientRecord]:
        # ids outside the BIGINT key range cannot be stored
        if not 1 <= patient_id <= MAX_PATIENT_ID:
            return None
        return await self.db.get(PatientRecord, patient_id)

    async def save(self, record: PatientRecord) -> PatientRecord:
        if record.patient_id is None:
            self.db.add(record)
        else:
            # merge copies every column onto the persistent instance
            record = await self.db.merge(record)
        await self.db.flush()
        await self.db.refresh(record)
        return record

    async def delete_by_id(self, patient_id: int) -> None:
        record = await self.find_by_id(patient_id)
        if record is not None:
            await self.db.delete(record)
            await self.db.flush()


def _copy(record: PatientRecord) -> PatientRecord:
    return PatientRecord(
        patient_id=record.patient_id,
        name=record.name,
        age=record.age,
        address=record.address,
    )


class InMemoryPatientRecordRepository(PatientRecordRepository):
    """Dict-backed store. Records are copied in and out so callers never alias stored state."""

    def __init__(self, records: Optional[list[PatientRecord]] = None):
        records = records or []
        self._records: dict[int, PatientRecord] = {
            r.patient_id: _copy(r) for r in records if r.patient_id is not None
        }
        self._ids = itertools.count(max(self._records, default=0) + 1)
        for record in records:
            if record.patient_id is None:
                stored = _copy(record)
                stored.patient_id = next(self._ids)
                self._records[stored.patient_id] = stored

    async def find_all(self) -> list[PatientRecord]:
        return [_copy(r) for r in self._records.values()]

    async def find_by_id(self, patient_id: int) -> Optional[PatientRecord]:
        record = self._records.get(patient_id)
        return _copy(record) if record is not None else None

    async def save(self, record: PatientRecord) -> PatientRecord:
        stored = _copy(record)
        if stored.patient_id is None:
            stored.patient_id = next(self._ids)
        self._records[stored.patient_id] = stored
        return _copy(stored)

    async def delete_by_id(self, patient_id: int) -> None:
        self._records.pop(patient_id, None)
