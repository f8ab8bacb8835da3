import logging
import math
from decimal import ROUND_HALF_UP, Decimal

logger = logging.getLogger(__name__)


def round_half_up(value: float, digits: int = 0) -> float:
    """Round like a calculator does (0.5 goes up) instead of the banker's rounding of round().

    Args:
        value (float): value to round. Non-finite value is returned as is.
        digits (int, optional): decimal places to keep. Defaults to 0.

    Returns:
        float: rounded value
    """
    if not math.isfinite(value):
        return value
    exp = Decimal(1).scaleb(-digits)
    return float(Decimal(repr(value)).quantize(exp, rounding=ROUND_HALF_UP))


def finite_or_zero(value: float) -> float:
    if value is None or not math.isfinite(value) or value < 0:
        logger.debug(f"{value} is clamped to 0")
        return 0.0
    return value
