"""Contract number generation."""

import time
from datetime import datetime
from typing import Optional

from .settings import FinancingSettings, financing_settings


def generate_contract_number(
    now: Optional[datetime] = None,
    clock_ns: Optional[int] = None,
    settings: Optional[FinancingSettings] = None,
) -> str:
    """
    Build a contract number such as ``KTR-20250917-04213``.

    The suffix is the nanosecond clock reduced by the configured modulus,
    so two contracts created on the same day may collide. The transactions
    table carries a unique constraint on the column.

    Args:
        now: Date to stamp on the contract, defaults to the current time
        clock_ns: Nanosecond clock reading, defaults to ``time.time_ns()``
        settings: Financing settings override
    """
    cfg = settings or financing_settings
    now = now or datetime.now()
    clock_ns = time.time_ns() if clock_ns is None else clock_ns

    suffix = clock_ns % cfg.contract_suffix_modulus
    return f"{cfg.contract_prefix}-{now:%Y%m%d}-{suffix:0{cfg.suffix_width}d}"
