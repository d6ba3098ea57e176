import asyncio
from datetime import timedelta

from faker import Faker
from sqlalchemy.ext.asyncio import AsyncSession

# Make sure paths are correct for script execution
import sys
import os
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from app import models
from app.crud import crud_area, crud_user
from app.db.session import AsyncSessionLocal
from app.models.enums import DeskType, UserRole, WorkSpaceStatus, WorkSpaceType
from app.utils.dates import utcnow

faker = Faker("en_GB")

seeded_user_credentials = {}
DEFAULT_PASSWORD = "Password123!"

AREAS = [
    ("Shoreditch", "shoreditch"),
    ("Camden", "camden"),
    ("Canary Wharf", "canary-wharf"),
    ("Soho", "soho"),
]

async def clear_all_data(db: AsyncSession):
    """Clears seeded tables, children first."""
    print("--- Clearing All Existing Data ---")
    for model in (
        models.PushNotification,
        models.InternalNotification,
        models.Viewing,
        models.Booking,
        models.WorkSpace,
        models.Location,
        models.Area,
        models.User,
    ):
        await db.execute(model.__table__.delete())
    await db.commit()
    print("--- All data cleared. ---")

async def get_or_create_user(db: AsyncSession, *, email: str, role: UserRole, full_name: str) -> models.User:
    user = await crud_user.get_user_by_email(db, email=email)
    if user:
        print(f"User {email} already exists. Skipping creation.")
        return user
    user = await crud_user.create_user(
        db,
        email=email,
        password=DEFAULT_PASSWORD,
        role=role,
        full_name=full_name,
        phone=faker.numerify("07#########"),
    )
    seeded_user_credentials[email] = DEFAULT_PASSWORD
    print(f"Created User: {email} (Role: {role.value})")
    return user

async def create_location(db: AsyncSession, *, seller: models.User, area: models.Area) -> models.Location:
    location = models.Location(
        user_id=seller.id,
        area_id=area.id,
        name=f"{faker.last_name()} House",
        address=faker.street_address(),
        latitude=float(faker.latitude()),
        longitude=float(faker.longitude()),
        town="London",
        postcode=faker.postcode(),
        description=faker.paragraph(nb_sentences=3),
        nearby=[{"type": "subway_station", "name": f"{faker.city()} Station", "distance": "0.4 km", "duration": "5 mins"}],
        work_space_types=[t.value for t in WorkSpaceType],
    )
    db.add(location)
    await db.flush()

    db.add_all([
        models.WorkSpace(
            location_id=location.id,
            type=WorkSpaceType.DESK.value,
            desk_type=DeskType.HOURLY_HOT_DESK.value,
            quantity=faker.random_int(min=5, max=30),
            price=float(faker.random_int(min=5, max=20)),
            opens_from="08:00",
            closes_at="20:00",
            description=faker.sentence(nb_words=10),
            status=WorkSpaceStatus.ACTIVE.value,
        ),
        models.WorkSpace(
            location_id=location.id,
            type=WorkSpaceType.PRIVATE_OFFICE.value,
            quantity=faker.random_int(min=1, max=4),
            price=float(faker.random_int(min=600, max=3000)),
            size=faker.random_int(min=10, max=60),
            capacity=faker.random_int(min=2, max=12),
            min_contract_length=faker.random_int(min=1, max=12),
            available_from=utcnow() + timedelta(days=faker.random_int(min=0, max=30)),
            facilities=["wifi", "kitchen", "printing"],
            description=faker.sentence(nb_words=10),
            status=WorkSpaceStatus.ACTIVE.value,
        ),
        models.WorkSpace(
            location_id=location.id,
            type=WorkSpaceType.MEETING_ROOM.value,
            quantity=1,
            price=float(faker.random_int(min=20, max=80)),
            size=faker.random_int(min=10, max=40),
            capacity=faker.random_int(min=4, max=16),
            description=faker.sentence(nb_words=10),
            status=WorkSpaceStatus.ACTIVE.value,
        ),
    ])
    await db.commit()
    print(f"Created Location: {location.name} in {area.name} for {seller.email}")
    return location

async def seed_data(clear: bool = False):
    async with AsyncSessionLocal() as db:
        if clear:
            await clear_all_data(db)

        print("--- Seeding Areas ---")
        areas = []
        for name, slug in AREAS:
            area = await crud_area.get_area_by_slug(db, slug=slug)
            if area is None:
                area = await crud_area.create_area(db, name=name, slug=slug)
                print(f"Created Area: {name}")
            areas.append(area)

        print("\n--- Creating Users ---")
        seller = await get_or_create_user(
            db, email="seller@example.com", role=UserRole.SELLER, full_name=faker.name()
        )
        await get_or_create_user(db, email="buyer@example.com", role=UserRole.BUYER, full_name=faker.name())
        await get_or_create_user(db, email="admin@example.com", role=UserRole.ADMIN, full_name="Site Admin")

        print("\n--- Creating Locations & Workspaces ---")
        for area in areas[:2]:
            await create_location(db, seller=seller, area=area)

    print("\n--- Seeding Completed ---")

    print("\n--- Seeded User Credentials ---")
    for email, password in seeded_user_credentials.items():
        print(f"Email: {email}, Password: {password}")

async def main():
    print("Starting database seed process...")
    await seed_data(clear="--clear" in sys.argv)
    print("Database seed process finished.")

if __name__ == "__main__":
    # Run `alembic upgrade head` first. Pass --clear to wipe existing rows.
    asyncio.run(main())
