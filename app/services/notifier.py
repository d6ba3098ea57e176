import logging
from typing import Any, Dict, Optional

import socketio
from fastapi.concurrency import run_in_threadpool

from app import models
from app.models.enums import NotificationEvent
from app.socket_handlers import user_room
from app.utils.email import render_event, send_email

logger = logging.getLogger(__name__)


class Notifier:
    """Outbound delivery of emails and realtime pushes. Called inline, no retries.

    Subclasses must override both `send_email` and `push`.
    """

    async def send_email(self, recipient: models.User, event: NotificationEvent, context: Dict[str, Any]) -> None:
        raise NotImplementedError

    async def push(self, user_id: int, payload: Dict[str, Any]) -> None:
        raise NotImplementedError


class ResendNotifier(Notifier):
    def __init__(self, sio: Optional[socketio.AsyncServer] = None):
        self.sio = sio

    async def send_email(self, recipient: models.User, event: NotificationEvent, context: Dict[str, Any]) -> None:
        subject, html_content = render_event(event, context)
        logger.info(f"Sending '{event.value}' email to user {recipient.id}")
        await run_in_threadpool(send_email, to=recipient.email, subject=subject, html_content=html_content)

    async def push(self, user_id: int, payload: Dict[str, Any]) -> None:
        if self.sio is None:
            logger.warning(f"No Socket.IO server attached, push for user {user_id} only stored")
            return
        # Delivery is best effort. The stored PushNotification row is what clients reload from.
        try:
            await self.sio.emit('push_notification', data=payload, room=user_room(user_id))
        except Exception as e:
            logger.error(f"Failed to emit Socket.IO push for user {user_id}: {e}", exc_info=True)
