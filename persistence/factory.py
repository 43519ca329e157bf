import logging

from config.settings import OnboardingSettings
from persistence.store import EmployeeStore, JsonFileSlots, MemorySlots

logger = logging.getLogger(__name__)


def build_store(settings: OnboardingSettings) -> EmployeeStore:
    if settings.store_backend == "memory":
        slots = MemorySlots()
    elif settings.store_backend == "postgres":
        from config.postgres import PostgresConfig
        from persistence.postgres_slots import PostgresSlots

        pg = PostgresConfig.from_env()
        slots = PostgresSlots(pg.connect(), table=pg.table)
        slots.setup()
    else:
        slots = JsonFileSlots(settings.store_path)

    logger.debug("Using %s store, slot %r", settings.store_backend, settings.store_key)
    return EmployeeStore(slots, key=settings.store_key)
