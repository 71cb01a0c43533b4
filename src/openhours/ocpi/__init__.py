"""
openhours.ocpi
~~~~~~~~~~~~~~

Projection of weekly opening hours onto the OCPI ``opening_times`` object.

Basic usage::

    from openhours.ocpi import project_to_ocpi
    from openhours.week import parse_opening_hours

    times = project_to_ocpi(parse_opening_hours("W1T08:00:00/W2T16:00:00"))
    times.to_dict()
    # → {"twentyfourseven": False,
    #    "regular_hours": [
    #        {"weekday": 1, "period_begin": "08:00", "period_end": "00:00"},
    #        {"weekday": 2, "period_begin": "00:00", "period_end": "16:00"}]}

Public API
----------
OCPIOpeningTimes   24/7 flag plus optional regular hours.
OCPIRegularHours   One weekday period.
project_to_ocpi    List of WeekInterval → OCPIOpeningTimes.
"""

from __future__ import annotations

from openhours.ocpi.opening_times import (
    OCPIOpeningTimes,
    OCPIRegularHours,
    project_to_ocpi,
)

__all__ = [
    "OCPIOpeningTimes",
    "OCPIRegularHours",
    "project_to_ocpi",
]
