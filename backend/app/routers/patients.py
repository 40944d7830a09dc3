from fastapi import APIRouter, Depends, Path, Response
from sqlalchemy.ext.asyncio import AsyncSession
from app.database import get_db
from app.models.patient_record import MAX_PATIENT_ID, PatientRecord
from app.repositories.patient_record_repository import SqlAlchemyPatientRecordRepository
from app.schemas.patient_record import PatientRecordCreate, PatientRecordUpdate, PatientRecordResponse
from app.services.patient_record_service import PatientRecordService

router = APIRouter()


def get_patient_record_service(db: AsyncSession = Depends(get_db)) -> PatientRecordService:
    return PatientRecordService(SqlAlchemyPatientRecordRepository(db))


@router.get("", response_model=list[PatientRecordResponse])
async def get_all_records(service: PatientRecordService = Depends(get_patient_record_service)):
    records = await service.list_records()
    return [PatientRecordResponse.model_validate(r) for r in records]


@router.get("/{patient_id}", response_model=PatientRecordResponse)
async def get_patient_by_id(
    patient_id: int = Path(..., ge=1, le=MAX_PATIENT_ID),
    service: PatientRecordService = Depends(get_patient_record_service),
):
    return PatientRecordResponse.model_validate(await service.get_by_id(patient_id))


@router.post("", response_model=PatientRecordResponse)
async def create_record(
    data: PatientRecordCreate,
    service: PatientRecordService = Depends(get_patient_record_service),
):
    record = PatientRecord(**data.model_dump(exclude={"patient_id"}))
    return PatientRecordResponse.model_validate(await service.create(record))


@router.put("", response_model=PatientRecordResponse)
async def update_patient_record(
    data: PatientRecordUpdate,
    service: PatientRecordService = Depends(get_patient_record_service),
):
    record = PatientRecord(**data.model_dump())
    return PatientRecordResponse.model_validate(await service.update(record))


@router.delete("/{patient_id}")
async def delete_patient_by_id(
    patient_id: int = Path(..., ge=1, le=MAX_PATIENT_ID),
    service: PatientRecordService = Depends(get_patient_record_service),
):
    await service.delete_by_id(patient_id)
    return Response(status_code=200)
