"""Process bootstrap for the timetable."""

import sys

from timetable.application.services.timetable_service import TimetableService
from timetable.core.config import Settings, load_settings
from timetable.core.observability import get_logger, setup_structured_logging
from timetable.domain.shared.exceptions import ConfigMissingError
from timetable.domain.timetable.entry import WEEKDAYS
from timetable.infrastructure.database.repositories.entry_repository import (
    SqlEntryStore,
)

logger = get_logger(__name__)


def create_timetable(settings: Settings) -> TimetableService:
    """Build the store from ``settings`` and return a loaded service."""
    return TimetableService(SqlEntryStore.from_settings(settings))


def main() -> int:
    try:
        settings = load_settings()
    except ConfigMissingError as e:
        logger.error("Startup aborted", error_type=e.error_type.value, error=e.message)
        return 1

    setup_structured_logging(settings)
    timetable = create_timetable(settings)

    per_day = {day: len(timetable.filter_by_day(day)) for day in WEEKDAYS}
    logger.info(
        "Timetable ready",
        total=len(timetable),
        durable=timetable.initial_load.durable,
        **per_day,
    )
    return 0


if __name__ == "__main__":
    sys.exit(main())
