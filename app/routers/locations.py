from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict

from app import models, schemas, services
from app.db.session import get_db
from app.dependencies import get_json_body, get_notifier, require_seller
from app.services.notifier import Notifier

router = APIRouter()

@router.post("/location", response_model=schemas.LocationCreated, status_code=status.HTTP_201_CREATED)
async def create_location(
    current_user: models.User = Depends(require_seller),
    data: Dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Create a location owned by the current seller. `area` is an area slug."""
    return await services.location_service.create(db, notifier=notifier, user=current_user, data=data)

@router.put("/location/{id}", response_model=schemas.Message)
async def update_location(
    id: int,
    current_user: models.User = Depends(require_seller),
    data: Dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_db),
):
    """Partially update a location. Only the supplied fields are validated."""
    return await services.location_service.update(db, user=current_user, location_id=id, data=data)

@router.delete("/location/{id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_location(
    id: int,
    current_user: models.User = Depends(require_seller),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    await services.location_service.delete(db, notifier=notifier, user=current_user, location_id=id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.get("/location/{id}", response_model=schemas.LocationDetail)
async def get_location(
    id: int,
    current_user: models.User = Depends(require_seller),
    db: AsyncSession = Depends(get_db),
):
    return await services.location_service.view(db, user=current_user, location_id=id)

@router.post("/location/{id}/workspace", response_model=schemas.WorkSpaceCreated, status_code=status.HTTP_201_CREATED)
async def add_workspace(
    id: int,
    current_user: models.User = Depends(require_seller),
    data: Dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_db),
):
    """Add a desk, private office or meeting room to a location.

    Required for all types: `type`, `quantity`, `price`, `description`.
    Desks need `deskType` (and `minContractLength` for monthly desks), private offices
    `size`, `capacity`, `minContractLength` and `availableFrom`, meeting rooms `size` and `capacity`.
    """
    return await services.location_service.add_workspace(db, user=current_user, location_id=id, data=data)

@router.get("/locations", response_model=schemas.SellerLocationListResponse)
async def seller_locations(
    current_user: models.User = Depends(require_seller),
    db: AsyncSession = Depends(get_db),
):
    """List the seller's locations with their workspaces grouped by type."""
    return await services.location_service.get_seller_locations(db, user=current_user)
