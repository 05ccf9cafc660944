"""End-to-end scenario through bootstrap and the message bus."""

from concurrent.futures import ThreadPoolExecutor

from vaxreg.bootstrap import bootstrap
from vaxreg.config import Settings
from vaxreg.domain.errors import FailureReason
from vaxreg.domain.value_objects import (
    DoseType,
    Location,
    SearchRequest,
    Tag,
    VaccineKey,
    VaccineType,
)
from vaxreg.service_layer import commands

# pylint: disable=magic-value-comparison

PUNE = Location(208080, "ABCD1", "PQRS2", "Pune")


def test_register_stock_search_and_book():
    """Centers are registered, stocked, searched and booked via commands."""
    app = bootstrap(Settings())
    bus = app.message_bus

    phc = bus.handle(
        commands.AddCenter("Center1", PUNE, "PHC type 1", frozenset({Tag.PHC}))
    )
    school = bus.handle(commands.AddCenter("Center2", PUNE))
    assert (phc.detail, school.detail) == ("C1", "C2")

    corbevax = VaccineKey.of("corbevax", "precaution")
    bus.handle(commands.AddAvailability("C1", VaccineKey.of("covishield", "dose1"), 2))
    bus.handle(commands.AddAvailability("C2", corbevax, 3))

    response = bus.handle(
        commands.SearchCenters(
            (
                SearchRequest(VaccineType.COVISHIELD, DoseType.DOSE1),
                SearchRequest(corbevax.vaccine_type, corbevax.dose_type),
            )
        )
    )
    assert [c.center_id for c in response.centers] == ["C1", "C2"]

    book = commands.BookSlot("C2", corbevax.vaccine_type, corbevax.dose_type)
    with ThreadPoolExecutor(max_workers=8) as ex:
        outcomes = list(ex.map(lambda _: bus.handle(book), range(10)))

    assert sum(1 for o in outcomes if o) == 3
    assert {o.reason for o in outcomes if not o} == {FailureReason.EXHAUSTED}
    assert app.registry.availability("C2", corbevax) == 0
