from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.future import select

from app.crud.base import CRUDBase
from app.models.viewing import Viewing
from app.models.workspace import WorkSpace

class CRUDViewing(CRUDBase[Viewing]):
    async def get_for_workspace(self, db: AsyncSession, *, workspace_id: int, viewing_id: int) -> Optional[Viewing]:
        stmt = (
            select(Viewing)
            .filter(Viewing.workspace_id == workspace_id, Viewing.id == viewing_id)
            .options(selectinload(Viewing.user), selectinload(Viewing.internal_notification))
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    async def get_for_user(self, db: AsyncSession, *, user_id: int, viewing_id: int) -> Optional[Viewing]:
        stmt = (
            select(Viewing)
            .filter(Viewing.user_id == user_id, Viewing.id == viewing_id)
            .options(selectinload(Viewing.workspace).selectinload(WorkSpace.location))
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

viewing = CRUDViewing(Viewing)
