from typing import Optional

from .application import ReservationService
from .config import Settings, get_settings
from .infrastructure import (
    InMemoryAccountStore,
    InMemoryRoomCatalog,
    StdLogger,
    configure_logging,
)


def bootstrap_app(settings: Optional[Settings] = None) -> ReservationService:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    # Каталог хранит тарифы: по ним заданы цены номеров и считаются счета
    catalog = InMemoryRoomCatalog(
        deluxe_rooms=settings.DELUXE_ROOMS,
        suite_rooms=settings.SUITE_ROOMS,
        billing_rules=settings.billing_rules(),
    )

    return ReservationService(
        catalog=catalog,
        accounts=InMemoryAccountStore(),
        logger=StdLogger(),
    )
