"""Service discovery: the registry interface and an in-memory registry."""

from __future__ import annotations

import logging
import random
import threading
import time
from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass

_log = logging.getLogger(__name__)

_ACTIVE_WINDOW = 5.0


class ServiceNotFoundError(LookupError):
    """Raised when no addresses are known for a service."""

    def __init__(self, message: str = "no service addresses found") -> None:
        super().__init__(message)


class Registry(ABC):
    """A registry of running service instances."""

    @abstractmethod
    def register(self, instance_id: str, service_name: str, host_port: str) -> None:
        """Record an instance of a service."""

    @abstractmethod
    def deregister(self, instance_id: str, service_name: str) -> None:
        """Remove an instance record."""

    @abstractmethod
    def service_addresses(self, service_name: str) -> list[str]:
        """Return the addresses of the active instances of a service."""

    @abstractmethod
    def report_healthy_state(self, instance_id: str, service_name: str) -> None:
        """Mark an instance as alive."""


def generate_instance_id(service_name: str) -> str:
    """Return ``service_name`` followed by a dash and a random non-negative number."""
    return f"{service_name}-{random.getrandbits(63)}"


@dataclass
class _Instance:
    host_port: str
    last_active: float


class MemoryRegistry(Registry):
    """A registry kept in memory; instances silent for over five seconds are skipped."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._lock = threading.RLock()
        self._services: dict[str, dict[str, _Instance]] = {}

    def register(self, instance_id: str, service_name: str, host_port: str) -> None:
        with self._lock:
            instances = self._services.setdefault(service_name, {})
            instances[instance_id] = _Instance(host_port, self._clock())

    def deregister(self, instance_id: str, service_name: str) -> None:
        with self._lock:
            instances = self._services.get(service_name)
            if instances is not None:
                instances.pop(instance_id, None)

    def report_healthy_state(self, instance_id: str, service_name: str) -> None:
        with self._lock:
            instances = self._services.get(service_name)
            if instances is None:
                raise LookupError(
                    f"instance {instance_id} of service {service_name} is not registered yet"
                )
            instance = instances.get(instance_id)
            if instance is None:
                raise LookupError("service instance is not registered yet")
            instance.last_active = self._clock()

    def service_addresses(self, service_name: str) -> list[str]:
        with self._lock:
            instances = self._services.get(service_name) or {}
            if not instances:
                raise ServiceNotFoundError()
            cutoff = self._clock() - _ACTIVE_WINDOW
            addresses = []
            for instance_id, instance in instances.items():
                if instance.last_active < cutoff:
                    _log.info(
                        "Instance %s of service %s is not active, skipping",
                        instance_id,
                        service_name,
                    )
                    continue
                addresses.append(instance.host_port)
            if not addresses:
                raise ServiceNotFoundError()
            return addresses