"""Access policy for seller resources.

Lookup and authorization are two separate steps. A missing resource and one
owned by somebody else produce the same 400 response so that a non-owner
cannot probe which ids exist.
"""
import logging

from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, models
from app.core.exceptions import bad_request_message

logger = logging.getLogger(__name__)


def owns_location(user: models.User, location: models.Location) -> bool:
    return location.user_id == user.id


async def get_owned_location(db: AsyncSession, *, user: models.User, location_id: int) -> models.Location:
    location = await crud.crud_location.location.get_location(db, location_id=location_id)
    if location is None or not owns_location(user, location):
        if location is not None:
            logger.warning(f"User {user.id} asked for location {location_id} owned by user {location.user_id}")
        raise bad_request_message(f"Location with id {location_id} was not found")
    return location


async def get_owned_workspace(db: AsyncSession, *, user: models.User, workspace_id: int) -> models.WorkSpace:
    workspace = await crud.crud_workspace.workspace.get_workspace(db, workspace_id=workspace_id)
    if workspace is None or workspace.location is None or not owns_location(user, workspace.location):
        raise bad_request_message(f"Workspace with id {workspace_id} was not found")
    return workspace
