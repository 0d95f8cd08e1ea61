"""
Factory for creating organization data source connectors.
"""

from .base import BaseConnector
from .json_file import JsonFileConnector
from .supabase import SupabaseConnector


class ConnectorFactory:
    """Factory class for creating connectors."""

    @staticmethod
    def create(connector_type: str, **kwargs) -> BaseConnector:
        """Create a connector instance based on type.

        Args:
            connector_type: Type of connector ('supabase', 'json')
            **kwargs: Additional arguments for connector initialization

        Returns:
            BaseConnector instance

        Raises:
            ValueError: If connector type is not supported or a required
                argument is missing
        """
        connector_type = connector_type.lower()

        if connector_type == 'supabase':
            supabase_kwargs = {}
            for key in ('api_key', 'table', 'timeout', 'max_retries', 'retry_delays'):
                if kwargs.get(key) is not None:
                    supabase_kwargs[key] = kwargs[key]
            return SupabaseConnector(kwargs.get('base_url'), **supabase_kwargs)
        elif connector_type == 'json':
            if not kwargs.get('path'):
                raise ValueError("A path is required for the json connector")
            return JsonFileConnector(kwargs['path'])
        else:
            raise ValueError(f"Unsupported connector type: {connector_type}")

    @staticmethod
    def get_available_connectors():
        """Get list of available connector types.

        Returns:
            List of available connector type names
        """
        return ['supabase', 'json']
