# flake8: noqa
from .common import Message, CamelModel
from .token import Token, TokenPayload
from .location import (
    LocationCreate, LocationUpdate, LocationCreated, LocationDetail,
    NearbyPlace, DeskRow, RoomRow, SellerLocation, SellerLocationListResponse
)
from .workspace import WorkSpaceCreate, WorkSpaceCreated
from .viewing import ViewingCreate, ViewingListItem
from .notification import InternalNotification, ViewingStatusResponse, PushNotification

from . import common, token, location, workspace, viewing, notification
