import logging
from typing import Optional

from app.exceptions import InvalidRequestException, NotFoundException
from app.models.patient_record import PatientRecord
from app.repositories.patient_record_repository import PatientRecordRepository

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("name", "age", "address")


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def validate_patient_record(record: Optional[PatientRecord]) -> None:
    """Reject records missing any required field. The id is not checked here."""
    if record is None:
        raise InvalidRequestException("PatientRecord must not be null!")
    missing = [field for field in REQUIRED_FIELDS if _is_blank(getattr(record, field))]
    if missing:
        raise InvalidRequestException(
            f"PatientRecord is missing required field(s): {', '.join(missing)}"
        )


class PatientRecordService:
    """CRUD rules for patient records on top of a record store."""

    def __init__(self, repository: PatientRecordRepository):
        self.repository = repository

    async def list_records(self) -> list[PatientRecord]:
        return await self.repository.find_all()

    async def get_by_id(self, patient_id: int) -> PatientRecord:
        record = await self.repository.find_by_id(patient_id)
        if record is None:
            raise NotFoundException(patient_id)
        return record

    async def create(self, record: PatientRecord) -> PatientRecord:
        validate_patient_record(record)
        # ids are always assigned by the store
        new_record = PatientRecord(name=record.name, age=record.age, address=record.address)
        saved = await self.repository.save(new_record)
        logger.info(f"Created patient record {saved.patient_id}")
        return saved

    async def update(self, record: Optional[PatientRecord]) -> PatientRecord:
        if record is None or record.patient_id is None:
            logger.warning("Rejected update without a patient ID")
            raise InvalidRequestException("PatientRecord or ID must not be null!")

        validate_patient_record(record)

        existing = await self.repository.find_by_id(record.patient_id)
        if existing is None:
            logger.warning(f"Rejected update of unknown patient {record.patient_id}")
            raise NotFoundException(record.patient_id)

        saved = await self.repository.save(record)
        logger.info(f"Updated patient record {saved.patient_id}")
        return saved

    async def delete_by_id(self, patient_id: int) -> None:
        if await self.repository.find_by_id(patient_id) is None:
            logger.warning(f"Rejected delete of unknown patient {patient_id}")
            raise NotFoundException(patient_id)
        await self.repository.delete_by_id(patient_id)
        logger.info(f"Deleted patient record {patient_id}")
