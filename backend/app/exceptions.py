class PatientRecordException(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class InvalidRequestException(PatientRecordException):
    """Caller-supplied data violates a precondition of the operation."""
    status_code = 400


class NotFoundException(PatientRecordException):
    """The referenced patient record does not exist."""
    status_code = 404

    def __init__(self, patient_id: int):
        self.patient_id = patient_id
        super().__init__(f"Patient with ID {patient_id} does not exist.")
