"""Factory for creating center initializers with registry pattern."""

import logging
from typing import Callable, Dict, List, Type

from spkmeans.initializers.base import BaseInitializer

logger = logging.getLogger(__name__)

# Registry to hold initializer classes
_INITIALIZER_REGISTRY: Dict[str, Type[BaseInitializer]] = {}


def register_initializer(name: str) -> Callable:
    """
    Decorator to register an initializer class.

    Usage:
        @register_initializer("random")
        class RandomInitializer(BaseInitializer):
            ...
    """
    def decorator(cls: Type[BaseInitializer]) -> Type[BaseInitializer]:
        if name in _INITIALIZER_REGISTRY:
            logger.warning(f"Overwriting existing initializer: {name}")
        _INITIALIZER_REGISTRY[name] = cls
        cls.name = name
        logger.debug(f"Registered initializer: {name} -> {cls.__name__}")
        return cls
    return decorator


def get_registered_initializers() -> List[str]:
    """Return list of registered initializer names."""
    return list(_INITIALIZER_REGISTRY.keys())


class InitializerFactory:
    """
    Factory that creates initializers based on config.

    Usage:
        initializer = InitializerFactory.create("kmeans++")

        # Or from a config section
        initializer = InitializerFactory.from_config({"initializer": "random"})
    """

    @classmethod
    def create(cls, name: str, **kwargs) -> BaseInitializer:
        """
        Create an initializer instance.

        Args:
            name: Initializer name ('random', 'kmeans++')
            **kwargs: Initializer-specific configuration

        Returns:
            Initializer instance

        Raises:
            ValueError: If name is unknown
        """
        if name not in _INITIALIZER_REGISTRY:
            available = get_registered_initializers()
            raise ValueError(
                f"Unknown initializer: '{name}'. "
                f"Available: {available}"
            )

        initializer_class = _INITIALIZER_REGISTRY[name]
        logger.debug(f"Creating initializer: {name}")

        return initializer_class(**kwargs)

    @classmethod
    def from_config(cls, config: dict) -> BaseInitializer:
        """
        Create initializer from config dict.

        Args:
            config: Config dict with an 'initializer' key (default 'kmeans++')

        Returns:
            Initializer instance
        """
        name = config.get("initializer", "kmeans++")
        return cls.create(name)
