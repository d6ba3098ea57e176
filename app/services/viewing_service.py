import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, models, schemas
from app.core.exceptions import bad_request_message
from app.models.enums import (
    InternalNotificationStatus,
    NotificationEvent,
    PushNotificationType,
    UserActivityStatus,
    ViewingStatus,
    WorkSpaceStatus,
)
from app.services import user_status_service
from app.services.notifier import Notifier
from app.services.validation import validate_payload
from app.utils.dates import (
    as_timestamp,
    format_long_date,
    format_short_time,
    from_timestamp,
    to_timestamp,
    utcnow,
)
from app.utils.links import FrontUrls, generate_front_link

logger = logging.getLogger(__name__)


def get_list(workspace: models.WorkSpace) -> List[schemas.ViewingListItem]:
    items = []
    for viewing in workspace.viewings:
        user = viewing.user
        items.append(
            schemas.ViewingListItem(
                id=viewing.id,
                start_time=to_timestamp(viewing.start_time),
                end_time=to_timestamp(viewing.end_time),
                phone=viewing.phone,
                status=viewing.status.value,
                meeting_name=None,
                name=user.full_name if user is not None else None,
                email=user.email if user is not None else None,
            )
        )
    return items


async def add_viewing(
    db: AsyncSession,
    *,
    notifier: Notifier,
    user: models.User,
    workspace: models.WorkSpace,
    data: Dict[str, Any],
) -> schemas.Message:
    """Books a buyer onto a workspace's viewing schedule. Overlapping viewings are allowed."""
    if not data.get("startTime"):
        raise bad_request_message("Please, choose a start date")

    requested_start = as_timestamp(data["startTime"])
    if workspace.available_from is not None and requested_start is not None:
        if to_timestamp(workspace.available_from) > requested_start:
            logger.warning(
                f"Viewing for workspace {workspace.id} requested before it is available ({requested_start})"
            )
            raise bad_request_message(
                "Viewing for this workspace is temporarily unavailable. Please, try again later"
            )

    viewing_in = validate_payload(schemas.ViewingCreate, data)

    start_time = from_timestamp(viewing_in.start_time)
    end_time = from_timestamp(viewing_in.end_time) if viewing_in.end_time is not None else start_time

    viewing = models.Viewing(
        start_time=start_time,
        end_time=end_time,
        phone=viewing_in.phone,
        user_id=user.id,
        status=ViewingStatus.PENDING,
        workspace_id=workspace.id,
    )
    await crud.crud_viewing.viewing.save(db, db_obj=viewing)
    logger.info(f"Viewing {viewing.id} requested by user {user.id} for workspace {workspace.id}")

    location = workspace.location
    seller = location.user

    await notifier.send_email(
        seller,
        NotificationEvent.VIEWING_REQUEST,
        {
            "location": location,
            "workspace": workspace,
            "seller": seller,
            "buyer": user,
            "viewing": viewing,
            "link": generate_front_link(FrontUrls.IN_DEPTH.format(workspace_id=workspace.id)),
            "linkNotification": generate_front_link(FrontUrls.NOTIFICATIONS),
        },
    )

    await crud.crud_notification.create_internal_notification(
        db,
        user_id=seller.id,
        viewing_id=viewing.id,
        params={
            "time": format_short_time(viewing.start_time),
            "date": format_long_date(viewing.start_time),
            "location_name": location.name,
        },
    )

    await user_status_service.change_status(db, user=user, status=UserActivityStatus.BOOKED_VIEWING)

    return schemas.Message(message="You have been successfully added to the viewing schedule")


async def update_status(
    db: AsyncSession,
    *,
    notifier: Notifier,
    workspace: models.WorkSpace,
    viewing_id: int,
    status: Any,
) -> schemas.Message | schemas.ViewingStatusResponse:
    """Seller accepts or declines a viewing. Setting the current status again is a no-op."""
    try:
        new_status = ViewingStatus(status)
    except ValueError:
        raise bad_request_message("Wrong status")

    viewing = await crud.crud_viewing.viewing.get_for_workspace(
        db, workspace_id=workspace.id, viewing_id=viewing_id
    )
    if viewing is None:
        raise bad_request_message("Booking record doesn't exist")

    if viewing.status == new_status:
        return schemas.Message(message="Nothing to change")

    viewing.status = new_status
    await crud.crud_viewing.viewing.save(db, db_obj=viewing)
    logger.info(f"Viewing {viewing.id} moved to '{new_status.value}'")

    location = workspace.location
    params = {
        "time": format_short_time(viewing.start_time),
        "date": format_long_date(viewing.start_time),
        "workspace_info": workspace.workspace_info,
        "location_name": location.name,
    }

    notification = viewing.internal_notification
    if new_status == ViewingStatus.ACCEPTED:
        buyer = viewing.user
        await notifier.send_email(
            buyer,
            NotificationEvent.VIEWING_APPROVED,
            {
                "seller": location.user,
                "buyer": buyer,
                "location": location,
                "workspace": workspace,
                "link": generate_front_link(FrontUrls.IN_DEPTH.format(workspace_id=workspace.id)),
                "viewing": viewing,
            },
        )

        push_params = {
            "startTime": viewing.start_time.strftime("%H:%M"),
            "startDate": viewing.start_time.strftime("%d.%m.%Y"),
            "address": location.address,
            "user": buyer.full_name,
        }
        push = await crud.crud_notification.create_push_notification(
            db,
            user_id=buyer.id,
            params=push_params,
            type=PushNotificationType.VIEWING_ACCEPTED,
            related_id=viewing.id,
        )
        await notifier.push(
            buyer.id,
            schemas.PushNotification.model_validate(push).model_dump(mode="json", by_alias=True),
        )

        notification = await crud.crud_notification.change_internal_notification_status(
            db, notification=notification, status=InternalNotificationStatus.VIEWING_ACCEPTED, params=params
        )
    elif new_status == ViewingStatus.DECLINED:
        notification = await crud.crud_notification.change_internal_notification_status(
            db, notification=notification, status=InternalNotificationStatus.VIEWING_DECLINED, params=params
        )

    checked = schemas.InternalNotification.model_validate(notification) if notification is not None else None
    return schemas.ViewingStatusResponse(internal_notification=checked)


@dataclass
class CheckResult:
    """Outcome of the cancellation prechecks: either the loaded entities or the first failure."""
    ok: bool
    reason: Optional[str] = None
    viewing: Optional[models.Viewing] = None

    @classmethod
    def fail(cls, reason: str) -> "CheckResult":
        return cls(ok=False, reason=reason)


# Ordered (name, predicate, failure message). Each predicate receives the loaded viewing.
CANCEL_CHECKS: Sequence[tuple[str, Callable[[models.Viewing], bool], str]] = (
    ("not_canceled", lambda v: v.status != ViewingStatus.CANCELED, "Viewing already canceled"),
    ("workspace_exists", lambda v: v.workspace is not None, "Workspace was not found"),
    (
        "workspace_active",
        lambda v: v.workspace.status == WorkSpaceStatus.ACTIVE.value,
        "Workspace is not available. Please, try again later",
    ),
    ("location_exists", lambda v: v.workspace.location is not None, "No location was found"),
)


async def check_viewing(db: AsyncSession, *, user: models.User, viewing_id: int) -> CheckResult:
    viewing = await crud.crud_viewing.viewing.get_for_user(db, user_id=user.id, viewing_id=viewing_id)
    if viewing is None:
        return CheckResult.fail("Viewing record was not found")

    for name, predicate, message in CANCEL_CHECKS:
        if not predicate(viewing):
            logger.info(f"Viewing {viewing_id} cancel check '{name}' failed for user {user.id}")
            return CheckResult.fail(message)

    return CheckResult(ok=True, viewing=viewing)


async def cancel_viewing(db: AsyncSession, *, user: models.User, viewing_id: int) -> dict:
    result = await check_viewing(db, user=user, viewing_id=viewing_id)
    if not result.ok:
        raise bad_request_message(result.reason)

    viewing = result.viewing
    if viewing.start_time < utcnow():
        raise bad_request_message("You cannot cancel the expired viewing")

    viewing.status = ViewingStatus.CANCELED
    await crud.crud_viewing.viewing.save(db, db_obj=viewing)
    logger.info(f"Viewing {viewing.id} canceled by user {user.id}")

    return {}
