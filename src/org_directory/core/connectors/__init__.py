"""Connectors delivering organization records from a data source."""

from .base import BaseConnector, ConnectorError
from .supabase import SupabaseConnector
from .json_file import JsonFileConnector
from .factory import ConnectorFactory

__all__ = [
    "BaseConnector",
    "ConnectorError",
    "SupabaseConnector",
    "JsonFileConnector",
    "ConnectorFactory",
]
