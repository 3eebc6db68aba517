"""
Clients module.

Customers of a company. Every client belongs to exactly one company and
appears in that company's client list.
"""

from .interfaces import IClientService
from .models import (
    Client,
    ClientData,
    UpdateClientData,
    ClientSummary,
)
from .repository import ClientRepository
from .exceptions import ClientNotFoundError

__all__ = [
    "IClientService",
    "Client",
    "ClientData",
    "UpdateClientData",
    "ClientSummary",
    "ClientRepository",
    "ClientNotFoundError",
]
