from typing import Any, Generic, List, Optional, Type, TypeVar
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.future import select

from app.db.base_class import Base

ModelType = TypeVar("ModelType", bound=Base)

class CRUDBase(Generic[ModelType]):
    def __init__(self, model: Type[ModelType]):
        """
        CRUD object with default methods to Read, Save and Delete.

        **Parameters**

        * `model`: A SQLAlchemy model class
        """
        self.model = model

    async def get(self, db: AsyncSession, id: Any, options: Optional[List] = None) -> Optional[ModelType]:
        statement = select(self.model).filter(self.model.id == id)
        if options:
            statement = statement.options(*options)
        result = await db.execute(statement)
        return result.scalar_one_or_none()

    async def save(self, db: AsyncSession, *, db_obj: ModelType) -> ModelType:
        """Adds the object to the session and commits. Attributes stay loaded (expire_on_commit=False)."""
        db.add(db_obj)
        await db.commit()
        return db_obj

    async def remove(self, db: AsyncSession, *, db_obj: ModelType) -> None:
        await db.delete(db_obj)
        await db.commit()
