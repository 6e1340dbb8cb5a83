"""
Seed the database with demo organisations, patients and sample results.
Run from apps/api after `alembic upgrade head`: python scripts/seed_db.py
"""
import asyncio
import logging
import random
import sys
from datetime import datetime, timedelta
from pathlib import Path

# Ensure sample_search is importable when run from repo root or apps/api
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

logger = logging.getLogger(__name__)

from sample_search.db.session import async_session
from sample_search.db.models import Organisation, Profile, Result, ResultType

ORGANISATIONS = ["Circle", "Prenetics", "Harbour Clinic"]
PATIENTS_PER_ORG = 5
RESULTS_PER_PATIENT = (3, 9)

PATIENT_NAMES = [
    "Peter Chan", "Michael Caine", "Bruce Lee", "John Locke", "Andrea Lau",
    "Mary Wong", "Kenneth Ho", "Grace Cheung", "Daniel Ng", "Olivia Tam",
    "Samuel Yip", "Chloe Lam", "Henry Fung", "Emily Tsang", "Jason Leung",
]

FIRST_ACTIVATION = datetime(2021, 7, 12, 15, 0, 0)
TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def generate_result(profile_id: str, index: int) -> Result:
    """One result: random 10-digit barcode, result time one hour after activation."""
    activate_time = FIRST_ACTIVATION + timedelta(days=index // 3, hours=index % 3)
    result_time = activate_time + timedelta(hours=1)
    return Result(
        profile_id=profile_id,
        result=random.choice(["negative", "positive"]),
        sample_id=str(random.randint(1_000_000_000, 9_999_999_999)),
        type=random.choice(list(ResultType)).value,
        activate_time=activate_time.strftime(TIME_FORMAT),
        result_time=result_time.strftime(TIME_FORMAT),
    )


async def run_seed() -> None:
    names = list(PATIENT_NAMES)
    random.shuffle(names)
    total_results = 0
    async with async_session() as session:
        for org_index, org_name in enumerate(ORGANISATIONS):
            org = Organisation(name=org_name)
            session.add(org)
            await session.flush()

            start = org_index * PATIENTS_PER_ORG
            for name in names[start:start + PATIENTS_PER_ORG]:
                profile = Profile(organisation_id=org.id, name=name)
                session.add(profile)
                await session.flush()

                for i in range(random.randint(*RESULTS_PER_PATIENT)):
                    session.add(generate_result(profile.id, i))
                    total_results += 1

            logger.info("Seeded organisation %s (%s)", org_name, org.id)
        await session.commit()

    logger.info("Done. Seeded %s organisations, %s results", len(ORGANISATIONS), total_results)


if __name__ == "__main__":
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%H:%M:%S",
    )
    logger.info("Starting seed: %s organisations, %s patients each", len(ORGANISATIONS), PATIENTS_PER_ORG)
    asyncio.run(run_seed())
