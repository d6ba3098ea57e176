import resend
import logging
from typing import Any, Dict, Tuple

from app.core.config import settings
from app.models.enums import NotificationEvent
from app.utils.dates import format_long_date, format_short_time

logger = logging.getLogger(__name__)

def send_email(to: str, subject: str, html_content: str) -> None:
    """Sends an email using the Resend service."""
    if not settings.RESEND_API_KEY or not settings.RESEND_API_KEY.get_secret_value():
        logger.error("RESEND_API_KEY is not configured or is empty. Cannot send email.")
        return

    logger.info(f"Attempting to send email to: {to} with subject: '{subject}' from: {settings.EMAIL_FROM_ADDRESS}")
    try:
        resend.api_key = settings.RESEND_API_KEY.get_secret_value()
        params = {
            "from": settings.EMAIL_FROM_ADDRESS,
            "to": [to],
            "subject": subject,
            "html": html_content,
        }
        email = resend.Emails.send(params)
        logger.info(f"Email sent successfully to {to}. Message ID: {email['id']}")
    except Exception as e:
        logger.error(f"Failed to send email to {to}. Error: {e}")
        raise # Re-raise the exception so the caller can handle it


def _greeting(user: Any) -> str:
    name = getattr(user, "full_name", None)
    return f"Hi {name}," if name else "Hello,"


def _location_added(context: Dict[str, Any]) -> Tuple[str, str]:
    location = context["location"]
    subject = f"Your location \"{location.name}\" has been added"
    html_content = f"""
    <p>{_greeting(context["seller"])}</p>
    <p>Your location <strong>{location.name}</strong> at {location.address}, {location.town} has been added.</p>
    <p>Our team will review it shortly. You can keep managing your workspaces from the
    <a href="{context["linkPortal"]}">portal</a>.</p>
    <p>Admin reference: <a href="{context["adminLink"]}">{context["adminLink"]}</a></p>
    """
    return subject, html_content


def _location_deleted(context: Dict[str, Any]) -> Tuple[str, str]:
    location = context["location"]
    subject = f"Your location \"{location.name}\" has been removed"
    html_content = f"""
    <p>{_greeting(context["seller"])}</p>
    <p>Your location <strong>{location.name}</strong> at {location.address} and all of its workspaces were removed.</p>
    <p>If this was not you, please contact our support team.</p>
    """
    return subject, html_content


def _viewing_request(context: Dict[str, Any]) -> Tuple[str, str]:
    viewing = context["viewing"]
    buyer = context["buyer"]
    location = context["location"]
    subject = f"New viewing request for {location.name}"
    html_content = f"""
    <p>{_greeting(context["seller"])}</p>
    <p>{buyer.full_name or buyer.email} would like to view
    <a href="{context["link"]}">{context["workspace"].workspace_info}</a> at <strong>{location.name}</strong>
    on {format_long_date(viewing.start_time)} at {format_short_time(viewing.start_time)}.</p>
    <p>Contact phone: {viewing.phone or "not provided"}</p>
    <p>Please accept or decline the request from your
    <a href="{context["linkNotification"]}">notifications</a>.</p>
    """
    return subject, html_content


def _viewing_approved(context: Dict[str, Any]) -> Tuple[str, str]:
    viewing = context["viewing"]
    location = context["location"]
    subject = f"Your viewing at {location.name} is confirmed"
    html_content = f"""
    <p>{_greeting(context["buyer"])}</p>
    <p>Your viewing of <a href="{context["link"]}">{context["workspace"].workspace_info}</a>
    at <strong>{location.name}</strong>, {location.address} is confirmed for
    {format_long_date(viewing.start_time)} at {format_short_time(viewing.start_time)}.</p>
    <p>See you there!</p>
    """
    return subject, html_content


TEMPLATES = {
    NotificationEvent.LOCATION_ADDED: _location_added,
    NotificationEvent.LOCATION_DELETED: _location_deleted,
    NotificationEvent.VIEWING_REQUEST: _viewing_request,
    NotificationEvent.VIEWING_APPROVED: _viewing_approved,
}


def render_event(event: NotificationEvent, context: Dict[str, Any]) -> Tuple[str, str]:
    """Returns (subject, html) for a notification event."""
    return TEMPLATES[event](context)
