from app.models.patient_record import PatientRecord

__all__ = ["PatientRecord"]
