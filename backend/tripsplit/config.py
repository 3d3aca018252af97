"""Runtime settings read from the environment."""
import os
from dataclasses import dataclass
from decimal import Decimal
from functools import lru_cache


@dataclass(frozen=True)
class Settings:
    # Pair nets and creditor/debtor positions at or below this are treated as settled.
    epsilon: Decimal = Decimal("0.01")
    # Allowed slack when percentages don't add to exactly 100.
    percentage_tolerance: Decimal = Decimal("0.5")
    default_currency: str = "USD"
    allowed_origins: tuple = ("*",)
    log_level: str = "WARNING"


def _origins(raw: str) -> tuple:
    origins = tuple(o.strip() for o in raw.split(",") if o.strip())
    return origins or ("*",)


@lru_cache
def get_settings() -> Settings:
    return Settings(
        epsilon=Decimal(os.getenv("TRIPSPLIT_EPSILON", "0.01")),
        percentage_tolerance=Decimal(os.getenv("TRIPSPLIT_PERCENTAGE_TOLERANCE", "0.5")),
        default_currency=os.getenv("TRIPSPLIT_DEFAULT_CURRENCY", "USD"),
        allowed_origins=_origins(os.getenv("ALLOWED_ORIGINS", "")),
        log_level=os.getenv("TRIPSPLIT_LOG_LEVEL", "WARNING").upper(),
    )
