from typing import Optional
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.models.area import Area

async def get_area_by_slug(db: AsyncSession, *, slug: str) -> Optional[Area]:
    result = await db.execute(select(Area).filter(Area.slug == slug))
    return result.scalar_one_or_none()

async def create_area(db: AsyncSession, *, name: str, slug: str) -> Area:
    db_obj = Area(name=name, slug=slug)
    db.add(db_obj)
    await db.commit()
    await db.refresh(db_obj)
    return db_obj
