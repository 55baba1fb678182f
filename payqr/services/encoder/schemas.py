"""API request/response schemas for the encoder endpoints."""

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr


class PaymentRequest(BaseModel):
    """Raw payload accepted by `POST /api/generate-qr`.

    Fields are deliberately loose: presence and range checks live in the
    encoder so the handler can report them as validation errors.
    """

    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    bank_bin_code: str | None = Field(default=None, alias="bankBinCode")
    bank_account: str | None = Field(default=None, alias="bankAccount")
    # Strict members keep JSON booleans as bool so the encoder can reject them.
    amount: StrictStr | StrictInt | StrictFloat | StrictBool | None = None
    message: str | None = None


class ValidatedRequest(BaseModel):
    """Request after presence and amount checks passed."""

    model_config = ConfigDict(frozen=True)

    bank_bin: str
    account_number: str
    amount: float
    message: str | None = None


class PaymentRecord(BaseModel):
    """Metadata echoed back with every encoded payment string."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    version: str = "1.0"
    bank_bin: str = Field(alias="bankBin")
    account_number: str = Field(alias="accountNumber")
    amount: float
    message: str
    timestamp: str
    encoded_string: str = Field(alias="qrString")


class EncodeResponse(BaseModel):
    """Success body for `POST /api/generate-qr`."""

    model_config = ConfigDict(populate_by_name=True)

    success: bool = True
    qr_code_string: str = Field(alias="qrCodeString")
    data: PaymentRecord
    message: str = "QR code generated successfully"


class ErrorResponse(BaseModel):
    """Error body shared by 4xx/5xx responses."""

    success: bool = False
    error: str
    details: str | None = None


class BankResponse(BaseModel):
    """One entry of `GET /banks`."""

    name: str
    short_name: str | None = None
    bin: str
