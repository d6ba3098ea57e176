import socketio
import logging
from jose import JWTError
from pydantic import ValidationError
from sqlalchemy.ext.asyncio import AsyncSession

from app import crud, security
from app.core.config import settings
from app.db.session import AsyncSessionLocal
from app.schemas.token import TokenPayload

logger = logging.getLogger(__name__)

# Same origins as the HTTP CORS policy
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=settings.ALLOWED_ORIGINS)

# {sid: user_id}. Single process only.
sid_user_map = {}

def user_room(user_id: int) -> str:
    """Every connection of a user joins this room; pushes are emitted to it."""
    return str(user_id)

async def _get_user_from_token(token: str, db: AsyncSession) -> int | None:
    if not token:
        return None
    try:
        token_data = TokenPayload(**security.decode_access_token(token))
    except (JWTError, ValidationError) as e:
        logger.warning(f"Token validation error: {e}")
        return None
    if token_data.user_id is None:
        logger.warning("Token payload missing user_id")
        return None

    user = await crud.crud_user.get_user_by_id(db, user_id=token_data.user_id)
    if user is None or not user.is_active:
        logger.warning(f"User not found or inactive for ID: {token_data.user_id}")
        return None
    return user.id

def register_socketio_handlers(sio: socketio.AsyncServer):
    @sio.event
    async def connect(sid, environ, auth):
        """Authenticates the client and joins it to its personal push room."""
        token = auth.get('token') if auth else None
        if not token:
            logger.warning(f"Connection refused for {sid}: No token provided.")
            return False

        async with AsyncSessionLocal() as db:
            user_id = await _get_user_from_token(token, db)

        if not user_id:
            logger.warning(f"Connection refused for {sid}: Token is invalid or user not found.")
            return False

        sid_user_map[sid] = user_id
        await sio.enter_room(sid, user_room(user_id))
        logger.info(f"Sid {sid} joined room '{user_room(user_id)}'")

    @sio.event
    async def disconnect(sid):
        user_id = sid_user_map.pop(sid, None)
        if user_id:
            logger.info(f"Removed mapping for sid {sid} (User: {user_id})")
        else:
            logger.warning(f"Sid {sid} disconnected but had no user mapping.")
