"""Service layer handlers."""

import logging
from collections.abc import Callable

from vaxreg.domain.center import Center, Inventory, NegativeUpdatePolicy
from vaxreg.domain.value_objects import Outcome, SearchResponse
from vaxreg.interfaces.center_registry import CenterRegistry
from vaxreg.interfaces.id_generator import CenterIdGenerator

from . import commands

logger = logging.getLogger(__name__)

# ============================================================================
#                           Center Management Handlers
# ============================================================================


def add_center(
    cmd: commands.AddCenter,
    registry: CenterRegistry,
    id_generator: CenterIdGenerator,
    negative_updates: NegativeUpdatePolicy = NegativeUpdatePolicy.REJECT,
) -> Outcome:
    """Register a new center; its id is generated unless the command names one.

    On success the Outcome's `detail` is the center id.
    """

    if cmd.center_id is None:
        center = Center.create(
            id_generator,
            cmd.name,
            cmd.location,
            description=cmd.description,
            tags=cmd.tags,
            negative_updates=negative_updates,
        )
    else:
        center = Center(
            center_id=cmd.center_id,
            name=cmd.name,
            location=cmd.location,
            description=cmd.description,
            tags=cmd.tags,
            inventory=Inventory(owner=cmd.center_id, negative_updates=negative_updates),
        )
    return registry.add_center(center)


# ============================================================================
#                           Availability Handlers
# ============================================================================


def add_availability(
    cmd: commands.AddAvailability, registry: CenterRegistry
) -> Outcome:
    """Stock a new key at a center."""
    return registry.add_availability(cmd.center_id, cmd.key, cmd.count)


def update_availability(
    cmd: commands.UpdateAvailability, registry: CenterRegistry
) -> Outcome:
    """Apply a delta to a stocked key at a center."""
    return registry.update_availability(cmd.center_id, cmd.key, cmd.delta)


def remove_availability(
    cmd: commands.RemoveAvailability, registry: CenterRegistry
) -> Outcome:
    """Delete a stocked key from a center."""
    return registry.remove_availability(cmd.center_id, cmd.key)


def book_slot(cmd: commands.BookSlot, registry: CenterRegistry) -> Outcome:
    """Book one slot at a center."""
    outcome = registry.book_slot(cmd.center_id, cmd.vaccine_type, cmd.dose_type)
    if outcome:
        logger.debug(
            "BookSlot %s %s/%s: booked", cmd.center_id, cmd.vaccine_type, cmd.dose_type
        )
    return outcome


# ============================================================================
#                               Search Handlers
# ============================================================================


def search_centers(
    cmd: commands.SearchCenters, registry: CenterRegistry
) -> SearchResponse:
    """Search centers; a single request keeps single-predicate semantics."""
    if len(cmd.requests) == 1:
        (request,) = cmd.requests
        return registry.search(request.vaccine_type, request.dose_type)
    return registry.search_any(cmd.requests)


COMMAND_HANDLERS: dict[type[commands.Command], Callable[..., object]] = {
    commands.AddCenter: add_center,
    commands.AddAvailability: add_availability,
    commands.UpdateAvailability: update_availability,
    commands.RemoveAvailability: remove_availability,
    commands.BookSlot: book_slot,
    commands.SearchCenters: search_centers,
}
