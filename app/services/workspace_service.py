import logging
from typing import Any, Dict

from pydantic.alias_generators import to_camel
from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, models, schemas
from app.core.exceptions import validation_failed
from app.models.enums import WorkSpaceStatus
from app.services.validation import validate_payload
from app.utils.dates import from_timestamp

logger = logging.getLogger(__name__)


async def add_workspace(
    db: AsyncSession, *, location: models.Location, data: Dict[str, Any]
) -> schemas.WorkSpaceCreated:
    """Creates a workspace inside an already authorized location."""
    workspace_in = validate_payload(schemas.WorkSpaceCreate, data)

    missing = workspace_in.missing_fields()
    if missing:
        raise validation_failed([
            {"attribute": to_camel(field), "details": "This value should not be blank."}
            for field in missing
        ])

    workspace = models.WorkSpace(
        location_id=location.id,
        type=workspace_in.type.value,
        desk_type=workspace_in.desk_type.value if workspace_in.desk_type else None,
        quantity=workspace_in.quantity,
        price=workspace_in.price,
        size=workspace_in.size,
        capacity=workspace_in.capacity,
        opens_from=workspace_in.opens_from,
        closes_at=workspace_in.closes_at,
        min_contract_length=workspace_in.min_contract_length,
        available_from=from_timestamp(workspace_in.available_from) if workspace_in.available_from is not None else None,
        facilities=workspace_in.facilities,
        description=workspace_in.description,
        status=WorkSpaceStatus.ACTIVE.value,
    )
    await crud.crud_workspace.workspace.save(db, db_obj=workspace)
    logger.info(f"Workspace {workspace.id} ({workspace.type}) added to location {location.id}")

    return schemas.WorkSpaceCreated(id=workspace.id)
