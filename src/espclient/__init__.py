"""espclient - Async collection stores for the enrollment web service."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("espclient")
except PackageNotFoundError:
    __version__ = "0+local"
from espclient._api.collections import collection_path, fetch_collection, parse_collection
from espclient._transport import HttpTransport, Transport
from espclient.client import EspClient
from espclient.config import EspConfig
from espclient.exceptions import (
    EspConfigError,
    EspError,
    EspPayloadError,
    EspTransportError,
)
from espclient.models import Course, Role, RoleType, Student, User, parse_items
from espclient.state.events import FetchFailed, FetchResult, FetchSucceeded, StoreStatus
from espclient.state.store import CollectionStore

__all__ = [
    "__version__",
    "CollectionStore",
    "Course",
    "EspClient",
    "EspConfig",
    "EspConfigError",
    "EspError",
    "EspPayloadError",
    "EspTransportError",
    "FetchFailed",
    "FetchResult",
    "FetchSucceeded",
    "HttpTransport",
    "Role",
    "RoleType",
    "Student",
    "StoreStatus",
    "Transport",
    "User",
    "collection_path",
    "fetch_collection",
    "parse_collection",
    "parse_items",
]
