from app.core.config import settings


class FrontUrls:
    MAIN_PORTAL = "/"
    NOTIFICATIONS = "/notifications"
    IN_DEPTH = "/workspace/{workspace_id}"


# Admin panel routes addressable by name
ADMIN_ROUTES = {
    "admin_app_location_edit": "/location/{id}/edit",
}


def generate_front_link(path: str) -> str:
    return f"{settings.FRONTEND_URL.rstrip('/')}/{path.lstrip('/')}"


def generate_admin_link(route: str, **params) -> str:
    """Builds an admin panel URL from a route name, e.g. ('admin_app_location_edit', id=3)."""
    path = ADMIN_ROUTES[route].format(**params)
    return f"{settings.ADMIN_URL.rstrip('/')}/{path.lstrip('/')}"
