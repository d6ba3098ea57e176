from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.crud.base import CRUDBase
from app.models.location import Location
from app.models.viewing import Viewing
from app.models.workspace import WorkSpace

class CRUDWorkSpace(CRUDBase[WorkSpace]):
    async def get_workspace(self, db: AsyncSession, *, workspace_id: int) -> Optional[WorkSpace]:
        """Workspace with its location (and the location's owner) and viewings with requesters."""
        return await self.get(
            db,
            id=workspace_id,
            options=[
                selectinload(WorkSpace.location).selectinload(Location.user),
                selectinload(WorkSpace.viewings).selectinload(Viewing.user),
            ],
        )

workspace = CRUDWorkSpace(WorkSpace)
