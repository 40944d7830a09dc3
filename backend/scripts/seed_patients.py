"""
Load the sample patient records into the database.
Run with: python -m scripts.seed_patients
Run with: python -m scripts.seed_patients --force  (insert even if records already exist)
"""

import argparse
import asyncio
from app.database import engine, async_session, Base
from app.models.patient_record import PatientRecord
from sqlalchemy import select, func

SAMPLE_PATIENTS = [
    {"name": "Rayven Yor", "age": 23, "address": "Cebu Philippines"},
    {"name": "David Landup", "age": 27, "address": "New York USA"},
    {"name": "Jane Doe", "age": 31, "address": "New York USA"},
]


async def seed(force: bool = False) -> int:
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        count = await db.scalar(select(func.count(PatientRecord.patient_id)))
        if count and not force:
            print(f"Database already has {count} patient records. Use --force to add samples anyway.")
            return 0

        for data in SAMPLE_PATIENTS:
            db.add(PatientRecord(**data))
        await db.commit()

    print(f"Inserted {len(SAMPLE_PATIENTS)} patient records.")
    return len(SAMPLE_PATIENTS)


async def main(force: bool = False):
    try:
        await seed(force=force)
    finally:
        await engine.dispose()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed sample patient records")
    parser.add_argument("--force", action="store_true", help="Insert samples even if records exist")
    args = parser.parse_args()
    asyncio.run(main(force=args.force))
