from typing import List, Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.future import select
import logging

from app.crud.base import CRUDBase
from app.models.location import Location
from app.models.workspace import WorkSpace

logger = logging.getLogger(__name__)

class CRUDLocation(CRUDBase[Location]):
    async def get_location(self, db: AsyncSession, *, location_id: int) -> Optional[Location]:
        """Fetch a location by id with its owner and area loaded. Ownership is not checked here."""
        return await self.get(
            db,
            id=location_id,
            options=[selectinload(Location.user), selectinload(Location.area)],
        )

    async def get_by_user(self, db: AsyncSession, *, user_id: int) -> List[Location]:
        stmt = (
            select(Location)
            .filter(Location.user_id == user_id)
            .options(
                selectinload(Location.workspaces).selectinload(WorkSpace.bookings),
                selectinload(Location.workspaces).selectinload(WorkSpace.viewings),
            )
            .order_by(Location.id)
        )
        result = await db.execute(stmt)
        return result.scalars().all()

    async def delete_location(self, db: AsyncSession, *, location: Location) -> None:
        location_id = location.id
        try:
            await self.remove(db, db_obj=location)
        except Exception as e:
            await db.rollback()
            logger.error(f"Database error deleting location {location_id}: {e}", exc_info=True)
            raise
        logger.info(f"Location ID: {location_id} deleted successfully.")

location = CRUDLocation(Location)
