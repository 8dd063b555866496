import asyncio
import sys
from pathlib import Path

# Add project root to sys.path
project_root = Path(__file__).resolve().parent.parent
sys.path.append(str(project_root))

from car_rental.application.interfaces.id_generator import RealIdGenerator  # noqa: E402
from car_rental.infrastructure.db.engine import AsyncSessionLocal, create_tables, engine  # noqa: E402
from car_rental.infrastructure.db.repositories import CarRepoSQL, UserRepoSQL  # noqa: E402
from car_rental.infrastructure.seed import seed_demo_data  # noqa: E402


async def seed():
    await create_tables()
    print("Created missing tables.")

    async with AsyncSessionLocal() as session:
        async with session.begin():
            cars, users = await seed_demo_data(
                CarRepoSQL(session), UserRepoSQL(session), RealIdGenerator()
            )

    print(f"Seeded {len(cars)} cars and {len(users)} users.")
    await engine.dispose()

if __name__ == "__main__":
    asyncio.run(seed())
