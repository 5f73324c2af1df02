"""Fixed-point token amounts: decimal <-> 18-decimal base units, fee arithmetic."""

from __future__ import annotations

from decimal import ROUND_DOWN, Context, Decimal, InvalidOperation
from typing import Any

from betsettle.errors import ValidationError

TOKEN_DECIMALS = 18
BPS_DENOMINATOR = 10_000

_SCALE = Decimal(10) ** TOKEN_DECIMALS
# Wide enough for uint256 values
_CTX = Context(prec=80)


def check_amount(value: Any, name: str = "amount") -> Decimal:
    """Return value as Decimal; raise ValidationError for NaN, infinity or negatives."""
    if isinstance(value, bool):
        raise ValidationError(f"{name} must be numeric, got {value!r}")
    try:
        d = value if isinstance(value, Decimal) else Decimal(str(value))
    except (InvalidOperation, TypeError, ValueError) as e:
        raise ValidationError(f"{name} must be numeric, got {value!r}") from e
    if not d.is_finite():
        raise ValidationError(f"{name} must be finite, got {value!r}")
    if d < 0:
        raise ValidationError(f"{name} must be non-negative, got {value!r}")
    return d


def check_fee_bps(fee_bps: int | None) -> int | None:
    """None passes through (fee unknown); otherwise an int in 0..10000."""
    if fee_bps is None:
        return None
    if isinstance(fee_bps, bool) or not isinstance(fee_bps, int):
        raise ValidationError(f"fee_bps must be an integer, got {fee_bps!r}")
    if not 0 <= fee_bps <= BPS_DENOMINATOR:
        raise ValidationError(f"fee_bps must be within 0..{BPS_DENOMINATOR}, got {fee_bps}")
    return fee_bps


def to_base_units(amount: Any) -> int:
    """Token amount -> integer base units (truncates below 1e-18, like parseEther)."""
    d = check_amount(amount)
    return int(_CTX.multiply(d, _SCALE).to_integral_value(rounding=ROUND_DOWN))


def from_base_units(units: int) -> Decimal:
    return _CTX.scaleb(Decimal(units), -TOKEN_DECIMALS)


def platform_fee(total_units: int, fee_bps: int | None) -> int:
    """Fee taken from the pool, in base units. Unknown fee counts as zero."""
    if not fee_bps:
        return 0
    return total_units * fee_bps // BPS_DENOMINATOR


def compute_payout(
    stake: Any,
    winning_pool: Any,
    total_pool: Any,
    fee_bps: int | None = None,
) -> Decimal:
    """Contract payout for a winning stake: stake * (total - fee) // winning_pool.

    A zero winning pool returns the stake unchanged.
    """
    stake_u = to_base_units(stake)
    winning_u = to_base_units(winning_pool)
    total_u = to_base_units(total_pool)
    if winning_u == 0:
        return from_base_units(stake_u)
    distributable = total_u - platform_fee(total_u, check_fee_bps(fee_bps))
    return from_base_units(stake_u * distributable // winning_u)
