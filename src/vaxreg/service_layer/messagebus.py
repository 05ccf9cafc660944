"""Message bus implementation for handling commands."""

import logging
from collections.abc import Callable

from vaxreg.interfaces.center_registry import CenterRegistry

from .commands import Command

logger = logging.getLogger(__name__)

# pylint: disable=too-few-public-methods


class NoHandlerForCommand(LookupError):
    """Exception raised when no handler is found for a command."""

    def __init__(self, cmd: Command) -> None:
        super().__init__(f"No handler found for command {type(cmd).__name__}")


class MessageBus:
    """A simple message bus for handling commands.

    The main responsibility of the message bus is to route commands to their
    appropriate handlers and hand their result back to the caller. It also
    manages logging during dispatch and exposes the registry the handlers were
    wired with, for convenience.

    Args:
        registry: The center registry. It should still have been injected into
            the command handlers; it is just also available here.
        command_handlers: A mapping of command types to their handlers.
            Handlers are callables that accept a single command argument.
            Additional dependencies are injected via closures.

    Note:
        Dispatch is synchronous: `handle()` returns once the handler returns.
    """

    def __init__(
        self,
        registry: CenterRegistry,
        command_handlers: dict[type[Command], Callable[..., object]],
    ) -> None:
        self.registry = registry
        self._command_handlers = command_handlers

    def handle(self, cmd: Command) -> object:
        """Handle a command by dispatching it to the appropriate handler.

        Args:
            cmd: The command to handle.

        Returns:
            Whatever the handler returned (an `Outcome` or a `SearchResponse`).

        Raises:
            NoHandlerForCommand: If no handler is found for the command type.
            Exception: If the handler raises an exception.
        """

        if handler := self._command_handlers.get(type(cmd)):
            handler_name = self._get_handler_name(handler)
            logger.debug("Handling command %s with handler %s", cmd, handler_name)
            try:
                return handler(cmd)
            except Exception:  # pylint: disable=broad-except
                logger.exception(
                    "Exception handling command %s with handler %s", cmd, handler_name
                )
                raise
        logger.error("No handler found for command %s", type(cmd).__name__)
        raise NoHandlerForCommand(cmd)

    @staticmethod
    def _get_handler_name(fn: Callable[..., object]) -> str:
        if hasattr(fn, "__name__"):
            return fn.__name__
        if hasattr(fn, "func") and hasattr(fn.func, "__name__"):
            return fn.func.__name__
        return repr(fn)
