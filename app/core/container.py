"""
Instance container - typed factory map for per-request adapters.

Adapters that talk to Google (auth, userinfo, notestore, sectionstore) are
built per request because most of them are bound to an HTTP client that
carries the caller's access token. The container maps an InstanceType to an
activator (a plain callable) and builds instances on demand.

Usage:
======
    container = Container()
    container.add(InstanceType.NOTESTORE, DriveNotestore)

    async with client_with_token(token) as http_client:
        store = container.get_instance(InstanceType.NOTESTORE, http_client)
"""

import logging
from enum import Enum
from typing import Any, Callable, Dict

from app.core.utils import append_error


logger = logging.getLogger("typing.core.container")


Activator = Callable[..., Any]


class InstanceType(Enum):
    """Kinds of instances the container knows how to build."""
    AUTH = "auth"
    USERINFO = "userinfo"
    NOTESTORE = "notestore"
    SECTIONSTORE = "sectionstore"


class ContainerError(Exception):
    """Base exception for instance container failures."""
    pass


class ActivatorNotFoundError(ContainerError):
    """Raised when no activator is registered for the requested type."""

    def __init__(self, instance_type: InstanceType):
        super().__init__("activator not found")
        self.instance_type = instance_type


class InstanceCreationError(ContainerError):
    """Raised when a registered activator fails to build its instance."""
    pass


class Container:
    """
    Registry of activators keyed by InstanceType.

    The container holds no instances, only factories, so a single container
    is shared by all requests.
    """

    def __init__(self):
        self._activators: Dict[InstanceType, Activator] = {}

    def add(self, instance_type: InstanceType, activator: Activator) -> None:
        """Register (or replace) the activator for an instance type."""
        self._activators[instance_type] = activator

    def has(self, instance_type: InstanceType) -> bool:
        return instance_type in self._activators

    def get_instance(self, instance_type: InstanceType, *params: Any) -> Any:
        """
        Build a new instance of the given type.

        Args:
            instance_type: Which adapter to build
            *params: Passed positionally to the activator (e.g. an HTTP client)

        Returns:
            Whatever the activator returns

        Raises:
            ActivatorNotFoundError: If nothing is registered for the type
            InstanceCreationError: If the activator raises
        """
        activator = self._activators.get(instance_type)
        if activator is None:
            raise ActivatorNotFoundError(instance_type)

        try:
            return activator(*params)
        except Exception as e:
            msg = append_error("instance creation failed, check the activator", e)
            logger.error(msg)
            raise InstanceCreationError(msg) from e
