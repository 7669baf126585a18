from __future__ import annotations

import logging
import threading
from typing import Mapping, Optional

from ..common.validators import require_non_negative_number
from ..core.enums import EmploymentCategory
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)

DEFAULT_BONUS_RATES: Mapping[EmploymentCategory, int] = {
    EmploymentCategory.PERMANENT: 5000,
    EmploymentCategory.PROBATION: 3000,
    EmploymentCategory.DAILY_WORKER: 2000,
}

# Public config keys, as exposed to settings and the HTTP API.
RATE_KEYS: Mapping[str, EmploymentCategory] = {
    "rate_permanent": EmploymentCategory.PERMANENT,
    "rate_probation": EmploymentCategory.PROBATION,
    "rate_daily_worker": EmploymentCategory.DAILY_WORKER,
}


def _resolve_category(key) -> EmploymentCategory:
    if isinstance(key, EmploymentCategory):
        return key
    if isinstance(key, str) and key in RATE_KEYS:
        return RATE_KEYS[key]
    category = EmploymentCategory.parse(key)
    if category is None:
        raise ValidationError(f"Unknown employment category: {key!r}")
    return category


class BonusRateConfig:
    """Currency-per-point rate for each employment category.

    Updates replace a single key (last writer wins); negative, non-finite or
    non-numeric rates are rejected. A zero rate is allowed and disables the
    bonus for that category.
    """

    def __init__(self, defaults: Optional[Mapping] = None):
        self._defaults = dict(DEFAULT_BONUS_RATES)
        for key, rate in (defaults or {}).items():
            self._defaults[_resolve_category(key)] = require_non_negative_number(rate, f"rate for {key}")
        self._lock = threading.Lock()
        self._rates = dict(self._defaults)

    def rate_for(self, category: Optional[EmploymentCategory]) -> float | int:
        """Rate for the category; unrecognized categories get the PERMANENT rate."""
        with self._lock:
            if category in self._rates:
                return self._rates[category]
            return self._rates[EmploymentCategory.PERMANENT]

    def update(self, category, rate) -> None:
        category = _resolve_category(category)
        try:
            rate = require_non_negative_number(rate, "rate")
        except ValidationError as exc:
            logger.warning("[BonusConfig] rejected rate %r for %s: %s", rate, category.value, exc)
            raise
        with self._lock:
            previous = self._rates[category]
            self._rates[category] = rate
        logger.info("[BonusConfig] %s rate %s -> %s", category.value, previous, rate)

    def reset_to_defaults(self) -> None:
        with self._lock:
            self._rates = dict(self._defaults)
        logger.info("[BonusConfig] rates reset to defaults")

    def as_dict(self) -> dict:
        with self._lock:
            return {key: self._rates[category] for key, category in RATE_KEYS.items()}
