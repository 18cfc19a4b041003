"""
plugins/service_locator.py
Service locator for plugin dependencies.

Plugins look up shared services (event system, world, command processor,
other plugins) by name instead of importing concrete implementations.
"""
from typing import Dict, Any


class ServiceNotFoundException(Exception):
    """Exception raised when a requested service is not found."""
    pass


class ServiceLocator:
    """Central registry of named services."""
    
    _instance = None
    
    @classmethod
    def get_instance(cls) -> 'ServiceLocator':
        if cls._instance is None:
            cls._instance = ServiceLocator()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None
    
    def __init__(self):
        self._services: Dict[str, Any] = {}
    
    def register_service(self, service_name: str, service: Any) -> None:
        self._services[service_name] = service
    
    def get_service(self, service_name: str) -> Any:
        """
        Get a service by name.
            
        Raises:
            ServiceNotFoundException: If the service is not found.
        """
        if service_name in self._services:
            return self._services[service_name]
        raise ServiceNotFoundException(f"Service '{service_name}' not found")
    
    def unregister_service(self, service_name: str) -> None:
        self._services.pop(service_name, None)
    
    def has_service(self, service_name: str) -> bool:
        return service_name in self._services


def get_service_locator() -> ServiceLocator:
    return ServiceLocator.get_instance()
