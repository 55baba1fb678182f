"""Encode one payment locally and print the payment string (or the error).

Useful for checking what a client will get back without running the service.
"""

import argparse
import json

from payqr.services.encoder.service import PaymentValidationError, encode_payment


def main() -> None:
    """Parse CLI args, encode, and print the record as JSON."""

    parser = argparse.ArgumentParser(description="Build a pipe-delimited payment string.")
    parser.add_argument("--bank-bin", required=True)
    parser.add_argument("--account", required=True)
    parser.add_argument("--amount", required=True)
    parser.add_argument("--message", default=None)
    parser.add_argument("--record", action="store_true", help="Print the full record instead of the string")
    args = parser.parse_args()

    payload = {
        "bankBinCode": args.bank_bin,
        "bankAccount": args.account,
        "amount": args.amount,
        "message": args.message,
    }
    try:
        record = encode_payment(payload)
    except PaymentValidationError as exc:
        raise SystemExit(f"{exc.code}: {exc}") from exc

    if args.record:
        print(json.dumps(record.model_dump(by_alias=True), ensure_ascii=False, indent=2))
    else:
        print(record.encoded_string)


if __name__ == "__main__":
    main()
