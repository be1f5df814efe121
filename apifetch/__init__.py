"""apifetch — JSON resource fetching against a fixed base URL."""

from apifetch.client import ResourceFetcher, fetch_resource
from apifetch.config import Config
from apifetch.errors import TRANSPORT_FAILURE, FetchError, UnauthorizedError
from apifetch.models import RequestOptions, merge_options

__all__ = [
    "Config",
    "FetchError",
    "RequestOptions",
    "ResourceFetcher",
    "TRANSPORT_FAILURE",
    "UnauthorizedError",
    "fetch_resource",
    "merge_options",
]
