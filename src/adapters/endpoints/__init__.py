"""Grupos de endpoints, uno por área funcional del vendor."""

from adapters.endpoints.app import AppEndpoints
from adapters.endpoints.destiny2 import Destiny2Endpoints
from adapters.endpoints.groupv2 import GroupV2Endpoints
from adapters.endpoints.root import RootEndpoints
from adapters.endpoints.user import UserEndpoints

__all__ = [
    "AppEndpoints",
    "Destiny2Endpoints",
    "GroupV2Endpoints",
    "RootEndpoints",
    "UserEndpoints",
]
