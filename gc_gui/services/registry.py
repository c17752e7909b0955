"""Named component registry with bounded asynchronous lookup."""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass, field
from typing import Any, Callable

from PySide6.QtCore import QObject, QTimer, Signal

from gc_common.errors import ProviderResolutionError, error_to_payload

logger = logging.getLogger(__name__)

ReadyCallback = Callable[[Any], None]
ErrorCallback = Callable[[ProviderResolutionError], None]

_USE_DEFAULT: Any = object()


@dataclass
class _Waiter:
    """A pending lookup for a component that is not registered yet."""

    waiter_id: int
    name: str
    on_ready: ReadyCallback
    on_error: ErrorCallback | None = None
    timer: QTimer | None = field(default=None, repr=False)

    def stop_timer(self) -> None:
        if self.timer is not None:
            self.timer.stop()
            self.timer.deleteLater()
            self.timer = None


class ComponentRegistry(QObject):
    """Registry mapping component names to live instances.

    Lookups for names that are not registered yet are queued and fire as
    soon as the component is registered. Each queued lookup may carry a
    timeout; when it expires the lookup is dropped and reported through
    ``resolution_failed`` and the lookup's error callback.
    """

    # Signals
    component_registered = Signal(str)  # name
    component_removed = Signal(str)  # name
    resolution_failed = Signal(str, str)  # name, message

    def __init__(
        self,
        default_timeout: float | None = 5.0,
        parent: QObject | None = None,
    ) -> None:
        super().__init__(parent)
        self._default_timeout = default_timeout
        self._components: dict[str, Any] = {}
        self._waiters: dict[int, _Waiter] = {}
        self._ids = itertools.count(1)

    @property
    def default_timeout(self) -> float | None:
        return self._default_timeout

    def names(self) -> list[str]:
        """Registered component names."""
        return list(self._components)

    def has(self, name: str) -> bool:
        return name in self._components

    def get(self, name: str) -> Any | None:
        """Return a registered component, or None."""
        return self._components.get(name)

    def pending(self, name: str | None = None) -> int:
        """Number of queued lookups, optionally for one name."""
        if name is None:
            return len(self._waiters)
        return sum(1 for waiter in self._waiters.values() if waiter.name == name)

    def register(self, name: str, component: Any) -> None:
        """Register ``component`` under ``name``, replacing any previous one.

        Queued lookups for ``name`` are resolved in the order they were made.
        """
        if name in self._components:
            logger.debug("Replacing registered component %s", name)
        self._components[name] = component
        self.component_registered.emit(name)

        ready = [w for w in self._waiters.values() if w.name == name]
        for waiter in ready:
            self._waiters.pop(waiter.waiter_id, None)
            waiter.stop_timer()
        for waiter in ready:
            waiter.on_ready(component)

    def unregister(self, name: str) -> None:
        """Remove a component; unknown names are ignored."""
        if self._components.pop(name, None) is not None:
            self.component_removed.emit(name)

    def when_ready(
        self,
        name: str,
        on_ready: ReadyCallback,
        on_error: ErrorCallback | None = None,
        timeout: float | None = _USE_DEFAULT,
    ) -> None:
        """Call ``on_ready(component)`` once ``name`` is registered.

        Runs immediately when the component already exists. ``timeout``
        defaults to the registry's default; ``None`` or a non-positive
        value waits forever.
        """
        if name in self._components:
            on_ready(self._components[name])
            return

        resolved_timeout = self._default_timeout if timeout is _USE_DEFAULT else timeout
        waiter = _Waiter(
            waiter_id=next(self._ids),
            name=name,
            on_ready=on_ready,
            on_error=on_error,
        )
        self._waiters[waiter.waiter_id] = waiter

        if resolved_timeout is not None and resolved_timeout > 0:
            timer = QTimer(self)
            timer.setSingleShot(True)
            timer.timeout.connect(lambda: self._expire(waiter.waiter_id, resolved_timeout))
            timer.start(int(resolved_timeout * 1000))
            waiter.timer = timer
        logger.debug("Waiting for component %s (timeout=%s)", name, resolved_timeout)

    def invoke_async(
        self,
        name: str,
        method: str,
        *args: Any,
        on_error: ErrorCallback | None = None,
        timeout: float | None = _USE_DEFAULT,
    ) -> None:
        """Call ``component.method(*args)`` once ``name`` is registered.

        A component without a callable ``method`` is reported like a
        timed-out lookup.
        """

        def call(component: Any) -> None:
            target = getattr(component, method, None)
            if not callable(target):
                error = ProviderResolutionError(
                    f"Component '{name}' has no method '{method}'",
                    context={"name": name, "method": method},
                )
                self._fail(name, error, on_error)
                return
            target(*args)

        self.when_ready(name, call, on_error=on_error, timeout=timeout)

    def _expire(self, waiter_id: int, timeout: float) -> None:
        waiter = self._waiters.pop(waiter_id, None)
        if waiter is None:
            return
        waiter.stop_timer()

        error = ProviderResolutionError(
            f"Component '{waiter.name}' was not registered within {timeout:g}s",
            context={"name": waiter.name, "timeout": timeout},
        )
        self._fail(waiter.name, error, waiter.on_error)

    def _fail(
        self,
        name: str,
        error: ProviderResolutionError,
        on_error: ErrorCallback | None,
    ) -> None:
        logger.warning("Component lookup failed: %s", error_to_payload(error))
        self.resolution_failed.emit(name, str(error))
        if on_error is not None:
            on_error(error)
