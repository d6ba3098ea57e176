import logging

from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware
import socketio

from app.routers import auth, locations, viewings
from app.core.config import settings
from app.core.exceptions import ApiError, api_error_handler
from app.socket_handlers import register_socketio_handlers, sio

logging.basicConfig(level=settings.LOG_LEVEL)

# Initialize FastAPI app, but name it 'fastapi_app' to avoid conflict
fastapi_app = FastAPI(
    title=settings.PROJECT_NAME,
    openapi_url="/api/openapi.json"
)

fastapi_app.state.sio = sio
fastapi_app.add_exception_handler(ApiError, api_error_handler)

# Set all CORS enabled origins
if settings.ALLOWED_ORIGINS:
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=[str(origin).strip() for origin in settings.ALLOWED_ORIGINS],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

fastapi_app.include_router(auth.router, prefix="/api/auth", tags=["auth"])
fastapi_app.include_router(locations.router, prefix="/api/seller", tags=["Seller"])
fastapi_app.include_router(viewings.seller_router, prefix="/api/seller", tags=["Seller"])
fastapi_app.include_router(viewings.buyer_router, prefix="/api/buyer", tags=["Buyer"])

@fastapi_app.get("/health", tags=["health"])
def read_root():
    return {"status": "ok"}

# Create the final ASGI app that wraps FastAPI and Socket.IO. 
# This 'app' is what uvicorn will run.
app = socketio.asgi.ASGIApp(sio, other_asgi_app=fastapi_app)
register_socketio_handlers(sio)
