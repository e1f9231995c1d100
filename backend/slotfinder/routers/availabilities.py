# backend/slotfinder/routers/availabilities.py
"""
Availabilities API endpoints.

GET /availabilities - bookable slots for consecutive days
"""

from fastapi import APIRouter, Depends, HTTPException

from ..errors import AvailabilityError
from ..schemas.availabilities import AvailabilitiesResponse, AvailabilityRead
from ..services.availability import (
    EventFetcher,
    SqlEventFetcher,
    compute_availabilities,
    get_slot_config,
    parse_start_date,
)


router = APIRouter(prefix="/availabilities", tags=["availabilities"])


def get_event_fetcher() -> EventFetcher:
    return SqlEventFetcher()


@router.get("", response_model=AvailabilitiesResponse)
async def get_availabilities(
    start_date: str,
    number_of_days: int | None = None,
    fetcher: EventFetcher = Depends(get_event_fetcher),
):
    """Get bookable slots for number_of_days days starting on start_date."""
    config = get_slot_config()
    if number_of_days is None:
        number_of_days = config.default_number_of_days

    if number_of_days > config.max_number_of_days:
        raise HTTPException(
            status_code=400,
            detail=f"number_of_days cannot be more than {config.max_number_of_days}",
        )

    try:
        start = parse_start_date(start_date)
        availabilities = await compute_availabilities(start, number_of_days, fetcher, config)
    except AvailabilityError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return AvailabilitiesResponse(
        start_date=start,
        number_of_days=max(number_of_days, 0),
        availabilities=[
            AvailabilityRead(date=a.date, slots=a.slots) for a in availabilities
        ],
        slot_step_minutes=config.slot_step_minutes,
    )
