from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, List

from app import crud, models, schemas, services
from app.core.exceptions import bad_request_message
from app.db.session import get_db
from app.dependencies import get_json_body, get_notifier, require_buyer, require_seller
from app.services.notifier import Notifier
from app.services.ownership import get_owned_workspace

seller_router = APIRouter()
buyer_router = APIRouter()

@seller_router.get("/workspace/{workspace_id}/viewings", response_model=List[schemas.ViewingListItem])
async def list_viewings(
    workspace_id: int,
    current_user: models.User = Depends(require_seller),
    db: AsyncSession = Depends(get_db),
):
    """List every viewing requested for one of the seller's workspaces."""
    workspace = await get_owned_workspace(db, user=current_user, workspace_id=workspace_id)
    return services.viewing_service.get_list(workspace)

@seller_router.put("/workspace/{workspace_id}/viewing/{viewing_id}")
async def update_viewing_status(
    workspace_id: int,
    viewing_id: int,
    current_user: models.User = Depends(require_seller),
    data: Dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Accept or decline a viewing. Body: {"status": "accepted" | "declined"}."""
    workspace = await get_owned_workspace(db, user=current_user, workspace_id=workspace_id)
    return await services.viewing_service.update_status(
        db, notifier=notifier, workspace=workspace, viewing_id=viewing_id, status=data.get("status")
    )

@buyer_router.post("/workspace/{workspace_id}/viewing", response_model=schemas.Message, status_code=status.HTTP_201_CREATED)
async def add_viewing(
    workspace_id: int,
    current_user: models.User = Depends(require_buyer),
    data: Dict[str, Any] = Depends(get_json_body),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Request a viewing. Body: startTime, optional endTime (unix timestamps) and phone."""
    workspace = await crud.crud_workspace.workspace.get_workspace(db, workspace_id=workspace_id)
    if workspace is None:
        raise bad_request_message(f"Workspace with id {workspace_id} was not found")
    return await services.viewing_service.add_viewing(
        db, notifier=notifier, user=current_user, workspace=workspace, data=data
    )

@buyer_router.put("/viewing/{viewing_id}/cancel")
async def cancel_viewing(
    viewing_id: int,
    current_user: models.User = Depends(require_buyer),
    db: AsyncSession = Depends(get_db),
):
    return await services.viewing_service.cancel_viewing(db, user=current_user, viewing_id=viewing_id)
