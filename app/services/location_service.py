import logging
from typing import Any, Dict, List

from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, models, schemas
from app.core.exceptions import validation_failed
from app.models.enums import NotificationEvent, WorkSpaceType
from app.services import workspace_service
from app.services.notifier import Notifier
from app.services.ownership import get_owned_location
from app.services.validation import validate_payload
from app.utils.links import FrontUrls, generate_admin_link, generate_front_link

logger = logging.getLogger(__name__)

AREA_NOT_FOUND = {"attribute": "area", "details": "This value do not exist"}

# Columns written from a validated payload, keyed by schema field name.
LOCATION_FIELDS = (
    "name",
    "address",
    "optional_address",
    "latitude",
    "longitude",
    "town",
    "postcode",
    "description",
)


async def _resolve_area(db: AsyncSession, slug: str) -> models.Area:
    area = await crud.crud_area.get_area_by_slug(db, slug=slug)
    if area is None:
        logger.warning(f"Area slug '{slug}' does not exist")
        raise validation_failed([AREA_NOT_FOUND])
    return area


def _apply_payload(location: models.Location, payload: Dict[str, Any]) -> None:
    for field in LOCATION_FIELDS:
        if field in payload:
            setattr(location, field, payload[field])
    if "nearby" in payload:
        location.nearby = payload["nearby"]
    if "work_space_types" in payload:
        types = payload["work_space_types"]
        location.work_space_types = [WorkSpaceType(t).value for t in types] if types is not None else None


async def create(
    db: AsyncSession, *, notifier: Notifier, user: models.User, data: Dict[str, Any]
) -> schemas.LocationCreated:
    location_in = validate_payload(schemas.LocationCreate, data)
    area = await _resolve_area(db, location_in.area)

    location = models.Location(user_id=user.id, area_id=area.id)
    _apply_payload(location, location_in.model_dump(exclude={"area"}))

    await crud.crud_location.location.save(db, db_obj=location)
    logger.info(f"Location {location.id} created by seller {user.id}")

    await notifier.send_email(
        user,
        NotificationEvent.LOCATION_ADDED,
        {
            "location": location,
            "seller": user,
            "adminLink": generate_admin_link("admin_app_location_edit", id=location.id),
            "linkPortal": generate_front_link(FrontUrls.MAIN_PORTAL),
        },
    )

    return schemas.LocationCreated(id=location.id)


async def update(
    db: AsyncSession, *, user: models.User, location_id: int, data: Dict[str, Any]
) -> schemas.Message:
    location = await get_owned_location(db, user=user, location_id=location_id)

    location_in = validate_payload(schemas.LocationUpdate, data)
    update_data = location_in.model_dump(exclude_unset=True)

    if update_data.get("area"):
        area = await _resolve_area(db, update_data["area"])
        location.area_id = area.id
        location.area = area

    _apply_payload(location, update_data)

    await crud.crud_location.location.save(db, db_obj=location)
    logger.info(f"Location {location.id} updated by seller {user.id}: {sorted(update_data)}")

    return schemas.Message(message="Location successfully updated")


async def delete(db: AsyncSession, *, notifier: Notifier, user: models.User, location_id: int) -> None:
    location = await get_owned_location(db, user=user, location_id=location_id)

    # Sent before the row goes away so the template can still read it.
    await notifier.send_email(
        location.user,
        NotificationEvent.LOCATION_DELETED,
        {"location": location, "seller": location.user},
    )

    await crud.crud_location.location.delete_location(db, location=location)


async def add_workspace(
    db: AsyncSession, *, user: models.User, location_id: int, data: Dict[str, Any]
) -> schemas.WorkSpaceCreated:
    location = await get_owned_location(db, user=user, location_id=location_id)
    return await workspace_service.add_workspace(db, location=location, data=data)


async def view(db: AsyncSession, *, user: models.User, location_id: int) -> schemas.LocationDetail:
    location = await get_owned_location(db, user=user, location_id=location_id)

    return schemas.LocationDetail(
        id=location.id,
        name=location.name,
        address=location.address,
        optional_address=location.optional_address,
        latitude=location.latitude,
        longitude=location.longitude,
        town=location.town,
        area=location.area.name if location.area else "",
        postcode=location.postcode,
        description=location.description,
        work_space_types=location.work_space_types or [],
    )


def _room_row(workspace: models.WorkSpace) -> schemas.RoomRow:
    return schemas.RoomRow(
        id=workspace.id,
        quantity=workspace.quantity,
        size=workspace.size,
        price=workspace.price,
        status=workspace.status,
        bookings=len(workspace.bookings),
        viewing=len(workspace.viewings),
    )


def _desk_row(workspace: models.WorkSpace) -> schemas.DeskRow:
    return schemas.DeskRow(
        id=workspace.id,
        quantity=workspace.quantity,
        type=workspace.desk_type,
        price=workspace.price,
        status=workspace.status,
        bookings=len(workspace.bookings),
        viewing=len(workspace.viewings),
    )


async def get_seller_locations(db: AsyncSession, *, user: models.User) -> schemas.SellerLocationListResponse:
    locations = await crud.crud_location.location.get_by_user(db, user_id=user.id)

    data: List[schemas.SellerLocation] = []
    for location in locations:
        desks, meeting_rooms, private_offices = [], [], []

        for workspace in location.workspaces:
            if workspace.type == WorkSpaceType.PRIVATE_OFFICE.value:
                private_offices.append(_room_row(workspace))
            elif workspace.type == WorkSpaceType.MEETING_ROOM.value:
                meeting_rooms.append(_room_row(workspace))
            elif workspace.type == WorkSpaceType.DESK.value:
                desks.append(_desk_row(workspace))
            else:
                logger.warning(f"Workspace {workspace.id} has unknown type '{workspace.type}', skipped")

        data.append(
            schemas.SellerLocation(
                id=location.id,
                name=location.name,
                address=location.address,
                postcode=location.postcode,
                desks=desks,
                meeting_rooms=meeting_rooms,
                private_offices=private_offices,
            )
        )

    return schemas.SellerLocationListResponse(locations=data)
