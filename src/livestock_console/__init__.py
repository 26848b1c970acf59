from .auth_store import AuthProvider, AuthStore, StaticTokenAuth
from .config import ClientConfig, ConfigError, load_config
from .controller import RemoteCollectionController
from .entities import CUSTOMERS, ENTITIES, OUTLETS, PRODUCTS, SUPPLIERS, EntityAdapter, get_entity
from .exceptions import (
    AuthMissingError,
    ConsoleError,
    EndpointNotFoundError,
    ForbiddenError,
    HttpError,
    NetworkError,
    NotFoundError,
    ParseError,
    ServerError,
    UnauthorizedError,
    ValidationError,
)
from .filters import ClientFilterEngine
from .http_client import HttpClient
from .menu_placement import Box, MenuPlacementResolver, Placement, Rect
from .mirror import CollectionMirror
from .models import (
    FilterState,
    ListPage,
    ListRequest,
    MutationResult,
    Record,
    ServerPaginationState,
    SessionData,
    Stats,
)
from .mutations import MutationGateway
from .page_controls import PageControls, page_window
from .screen_state import ScreenMode, ScreenState

__all__ = [
    "AuthMissingError",
    "AuthProvider",
    "AuthStore",
    "Box",
    "CUSTOMERS",
    "ClientConfig",
    "ClientFilterEngine",
    "CollectionMirror",
    "ConfigError",
    "ConsoleError",
    "ENTITIES",
    "EndpointNotFoundError",
    "EntityAdapter",
    "FilterState",
    "ForbiddenError",
    "HttpClient",
    "HttpError",
    "ListPage",
    "ListRequest",
    "MenuPlacementResolver",
    "MutationGateway",
    "MutationResult",
    "NetworkError",
    "NotFoundError",
    "OUTLETS",
    "PRODUCTS",
    "PageControls",
    "ParseError",
    "Placement",
    "Rect",
    "Record",
    "RemoteCollectionController",
    "SUPPLIERS",
    "ScreenMode",
    "ScreenState",
    "ServerError",
    "ServerPaginationState",
    "SessionData",
    "StaticTokenAuth",
    "Stats",
    "UnauthorizedError",
    "ValidationError",
    "get_entity",
    "load_config",
    "page_window",
]
