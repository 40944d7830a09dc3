from pydantic import BaseModel, Field
from typing import Optional
from app.models.patient_record import MAX_AGE, MAX_PATIENT_ID


class PatientRecordBase(BaseModel):
    name: str = Field(..., min_length=1)
    age: int = Field(..., ge=0, le=MAX_AGE, strict=True)
    address: str = Field(..., min_length=1)

    class Config:
        str_strip_whitespace = True


class PatientRecordCreate(PatientRecordBase):
    # Accepted for wire compatibility; the store assigns ids on create.
    patient_id: Optional[int] = Field(default=None, alias="patientId", ge=1, le=MAX_PATIENT_ID)

    class Config:
        populate_by_name = True


class PatientRecordUpdate(PatientRecordBase):
    patient_id: Optional[int] = Field(default=None, alias="patientId", ge=1, le=MAX_PATIENT_ID)

    class Config:
        populate_by_name = True


class PatientRecordResponse(PatientRecordBase):
    patient_id: Optional[int] = Field(default=None, alias="patientId")

    class Config:
        from_attributes = True
        populate_by_name = True
