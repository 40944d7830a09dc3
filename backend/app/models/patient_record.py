from sqlalchemy import BigInteger, Column, Integer, String, Text
from app.database import Base

# BIGINT / INTEGER column limits
MAX_PATIENT_ID = 2**63 - 1
MAX_AGE = 2**31 - 1


class PatientRecord(Base):
    __tablename__ = "patient_record"

    # SQLite only autoincrements an INTEGER primary key, which is 64-bit there anyway
    patient_id = Column(
        BigInteger().with_variant(Integer, "sqlite"),
        primary_key=True,
        autoincrement=True,
        index=True,
    )
    name = Column(String(200), nullable=False)
    age = Column(Integer, nullable=False)
    address = Column(Text, nullable=False)

    def __repr__(self) -> str:
        return (
            f"PatientRecord(patient_id={self.patient_id!r}, name={self.name!r}, "
            f"age={self.age!r}, address={self.address!r})"
        )
