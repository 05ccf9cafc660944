"""Bootstrap the message bus with handlers and a center registry."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from functools import partial
from typing import TYPE_CHECKING

from vaxreg import __version__, config
from vaxreg.adapters.id_generators import (
    SequentialIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from vaxreg.adapters.registry import InMemoryCenterRegistry
from vaxreg.logging import PROJECT_LOGGER, configure_logging, log_startup
from vaxreg.service_layer.handlers import COMMAND_HANDLERS
from vaxreg.service_layer.messagebus import MessageBus

if TYPE_CHECKING:
    from vaxreg.interfaces.center_registry import CenterRegistry
    from vaxreg.interfaces.id_generator import CenterIdGenerator
    from vaxreg.service_layer.commands import Command

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold the wired application."""

    registry: CenterRegistry
    message_bus: MessageBus
    id_generator: CenterIdGenerator
    settings: config.Settings


def build_registry() -> CenterRegistry:
    """Build a new, empty center registry."""
    return InMemoryCenterRegistry()


def build_id_generator(strategy: str) -> CenterIdGenerator:
    """Build the center id generator named by `strategy`."""
    match strategy:
        case "sequential":
            return SequentialIdGenerator()
        case "ulid":
            return ULIDGenerator()
        case "uuid4":
            return UUIDv4Generator()
        case _:
            raise config.InvalidSettingError(
                config.ID_STRATEGY_ENV, strategy, config.ID_STRATEGIES
            )


def build_message_bus(
    registry: CenterRegistry,
    command_handlers: dict[type[Command], Callable[..., object]],
    **extra_dependencies: object,
) -> MessageBus:
    """Build a message bus with injected dependencies."""
    dependencies = {"registry": registry, **extra_dependencies}
    injected_command_handlers = {
        command_type: inject_dependencies(handler, dependencies)
        for command_type, handler in command_handlers.items()
    }

    return MessageBus(
        registry,
        command_handlers=injected_command_handlers,
    )


def bootstrap(settings: config.Settings | None = None) -> AppContainer:
    """Wire a fresh registry, id generator and message bus.

    Installs VAXREG's console logging first when `settings.log_level` is set.

    Args:
        settings: Settings to use. Read from the environment when None.
    """
    if settings is None:
        settings = config.get_settings()
    if settings.log_level is not None:
        configure_logging(settings.log_level)

    registry = build_registry()
    id_generator = build_id_generator(settings.id_strategy)
    message_bus = build_message_bus(
        registry,
        COMMAND_HANDLERS,
        id_generator=id_generator,
        negative_updates=settings.negative_updates,
    )

    log_startup(
        logger,
        app_version=__version__,
        settings=settings,
        handlers=logging.getLogger(PROJECT_LOGGER).handlers,
    )

    return AppContainer(
        registry=registry,
        message_bus=message_bus,
        id_generator=id_generator,
        settings=settings,
    )


def inject_dependencies(
    handler: Callable, dependencies: Mapping[str, object]
) -> Callable:
    """Inject dependencies into a handler function based on its parameters."""
    params = inspect.signature(handler).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }
    return partial(handler, **deps)
