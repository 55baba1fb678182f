"""Payment-string validation and encoding.

Turns an untrusted payment request into a pipe-delimited payment reference
(`bin|account|amount[|message]`) plus a metadata record. Everything here is
pure and synchronous; the only shared input is the clock.
"""

import math
import re
from collections.abc import Callable, Mapping
from datetime import datetime, timezone
from typing import Any

from payqr.services.encoder.schemas import PaymentRecord, PaymentRequest, ValidatedRequest

PROTOCOL_VERSION = "1.0"
DELIMITER = "|"
MAX_MESSAGE_LENGTH = 100
REQUIRED_FIELDS = ("bankBinCode", "bankAccount", "amount")
DECIMAL_RE = re.compile(r"\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*", re.ASCII)


class PaymentValidationError(ValueError):
    """Base class for request rule violations reported back to the caller."""

    code = "INVALID_REQUEST"


class MissingFieldError(PaymentValidationError):
    """One or more required fields are absent or empty."""

    code = "MISSING_FIELD"

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(
            f"Missing required fields: {', '.join(fields)}. "
            "bankBinCode, bankAccount, and amount are required."
        )


class InvalidAmountError(PaymentValidationError):
    """Amount is not a finite number greater than zero."""

    code = "INVALID_AMOUNT"

    def __init__(self, amount: Any) -> None:
        self.amount = amount
        super().__init__("Amount must be a positive number.")


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _coerce_amount(raw: Any) -> float:
    if isinstance(raw, bool):
        raise InvalidAmountError(raw)
    # float() alone also takes "1_000", "inf" and non-ASCII digits.
    if isinstance(raw, str) and not DECIMAL_RE.fullmatch(raw):
        raise InvalidAmountError(raw)
    try:
        value = float(raw)
    except (TypeError, ValueError) as exc:
        raise InvalidAmountError(raw) from exc
    if math.isnan(value) or math.isinf(value) or value <= 0:
        raise InvalidAmountError(raw)
    return value


def validate(request: PaymentRequest) -> ValidatedRequest:
    """Check required fields and coerce the amount.

    Raises `MissingFieldError` listing every absent field before the amount is
    looked at, then `InvalidAmountError` for non-numeric or non-positive input.
    """

    values = {
        "bankBinCode": request.bank_bin_code,
        "bankAccount": request.bank_account,
        "amount": request.amount,
    }
    missing = [name for name in REQUIRED_FIELDS if not values[name]]
    if missing:
        raise MissingFieldError(missing)

    return ValidatedRequest(
        bank_bin=request.bank_bin_code,
        account_number=request.bank_account,
        amount=_coerce_amount(request.amount),
        message=request.message,
    )


def sanitize_message(message: str | None) -> str:
    """Make free text safe to embed as the last field of the payment string."""

    if not message:
        return ""
    cleaned = message.strip().replace(DELIMITER, "")
    return cleaned[:MAX_MESSAGE_LENGTH]


def format_amount(value: float) -> str:
    """Shortest stable decimal form: `100000.0 -> "100000"`, `12.5 -> "12.5"`."""

    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def format_timestamp(moment: datetime) -> str:
    """ISO-8601 in UTC with millisecond precision, e.g. `2024-05-01T08:30:00.123Z`."""

    return moment.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def build_payment_string(bank_bin: str, account_number: str, amount: float, message: str | None = None) -> str:
    fields = [bank_bin, account_number, format_amount(amount)]
    clean_message = sanitize_message(message)
    if clean_message:
        fields.append(clean_message)
    return DELIMITER.join(fields)


def encode(validated: ValidatedRequest, clock: Callable[[], datetime] = utc_now) -> PaymentRecord:
    """Build the payment record for an already validated request.

    The record keeps the caller's original message; only the encoded string
    carries the sanitized one.
    """

    encoded = build_payment_string(
        validated.bank_bin,
        validated.account_number,
        validated.amount,
        validated.message,
    )
    return PaymentRecord(
        version=PROTOCOL_VERSION,
        bank_bin=validated.bank_bin,
        account_number=validated.account_number,
        amount=validated.amount,
        message=validated.message or "",
        timestamp=format_timestamp(clock()),
        encoded_string=encoded,
    )


def encode_payment(
    request: PaymentRequest | Mapping[str, Any],
    clock: Callable[[], datetime] = utc_now,
) -> PaymentRecord:
    """Validate and encode in one step; accepts a model or plain JSON-like data."""

    if not isinstance(request, PaymentRequest):
        request = PaymentRequest.model_validate(request)
    return encode(validate(request), clock=clock)
