"""Typed client for the Client Portal Web API."""

from ibportal.client import Client
from ibportal.config import GatewayConfig, create_client, load_client
from ibportal.errors import ClientPortalError, IBError, StatusCodeError
from ibportal.transport import Transport, substitute_params

__all__ = [
    "Client",
    "ClientPortalError",
    "GatewayConfig",
    "IBError",
    "StatusCodeError",
    "Transport",
    "create_client",
    "load_client",
    "substitute_params",
]
