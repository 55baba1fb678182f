"""Public entrypoint for payment-string generation.

Owns the transport around the encoder: permissive CORS headers, preflight
handling, method checks, and mapping encoder errors to HTTP status codes.
"""

from time import perf_counter
from uuid import uuid4

import uvicorn
from fastapi import FastAPI, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException

from payqr.common.config import settings
from payqr.common.logging import configure_logging, logger, trace_id_ctx
from payqr.common.metrics import (
    encode_failure_total,
    encode_latency_seconds,
    encode_requests_total,
    encode_success_total,
    http_request_duration_seconds,
    http_requests_total,
    metrics_response,
)
from payqr.common.startup import log_startup_config
from payqr.common.tracing import instrument_app, setup_tracing
from payqr.services.encoder.banks import BANKS, find_bank
from payqr.services.encoder.schemas import BankResponse, EncodeResponse, ErrorResponse, PaymentRequest
from payqr.services.encoder.service import PaymentValidationError, encode_payment

configure_logging()
setup_tracing(settings.service_name)
log_startup_config(
    settings.service_name,
    [
        "SERVICE_NAME",
        "LOG_LEVEL",
        "TRACING_ENABLED",
        "OTEL_EXPORTER_OTLP_ENDPOINT",
        "OTEL_EXPORTER_OTLP_HEADERS",
        "CORS_ALLOW_ORIGIN",
    ],
)
app = FastAPI(title="PayQR Encoder")
instrument_app(app)


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_allow_origin,
        "Access-Control-Allow-Methods": "GET, POST, OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def error_response(status_code: int, error: str, details: str | None = None, headers=None) -> JSONResponse:
    body = ErrorResponse(error=error, details=details).model_dump(exclude_none=True)
    return JSONResponse(status_code=status_code, content=body, headers=headers)


@app.middleware("http")
async def transport_middleware(request: Request, call_next):
    """Answer preflights, stamp CORS headers, and record request metrics."""

    start = perf_counter()
    route = request.url.path
    method = request.method
    status_code = 500
    trace_id = request.headers.get("x-correlation-id") or str(uuid4())
    trace_id_ctx.set(trace_id)
    try:
        if method == "OPTIONS":
            response = Response(status_code=200)
        else:
            response = await call_next(request)
            route_obj = request.scope.get("route")
            if route_obj is not None and getattr(route_obj, "path", None):
                route = route_obj.path
        status_code = response.status_code
        response.headers.update(cors_headers())
        response.headers["x-correlation-id"] = trace_id
        return response
    finally:
        elapsed = max(0.0, perf_counter() - start)
        http_request_duration_seconds.labels(
            service=settings.service_name,
            route=route,
            method=method,
        ).observe(elapsed)
        http_requests_total.labels(
            service=settings.service_name,
            route=route,
            method=method,
            status_code=str(status_code),
        ).inc()


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Render framework errors (404, 405, ...) in the service's error shape."""

    del request
    if exc.status_code == 405:
        return error_response(405, "Method not allowed", headers=exc.headers)
    return error_response(exc.status_code, str(exc.detail), headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def body_error_handler(request: Request, exc: RequestValidationError):
    """Undecodable or wrongly-shaped bodies are client errors, not 422s."""

    logger.warning("invalid_request_body path=%s errors=%s", request.url.path, exc.errors())
    return error_response(400, "Invalid JSON in request body")


@app.post(
    "/api/generate-qr",
    response_model=EncodeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
def generate_qr(req: PaymentRequest):
    """Encode one payment into its pipe-delimited reference string.

    Validation failures return 400 with a readable message; anything else
    that goes wrong returns 500 with the fault detail.
    """

    encode_requests_total.labels(service=settings.service_name).inc()
    with encode_latency_seconds.labels(service=settings.service_name).time():
        try:
            record = encode_payment(req)
        except PaymentValidationError as exc:
            encode_failure_total.labels(service=settings.service_name, reason=exc.code).inc()
            logger.warning("payment_rejected code=%s error=%s", exc.code, exc)
            return error_response(400, str(exc))
        except Exception as exc:
            encode_failure_total.labels(service=settings.service_name, reason="INTERNAL_FAULT").inc()
            logger.exception("payment_encode_failed")
            return error_response(500, "Internal server error while generating QR code", details=str(exc))

    encode_success_total.labels(service=settings.service_name).inc()
    logger.info(
        "payment_encoded bank_bin=%s amount=%s message_length=%s",
        record.bank_bin,
        record.amount,
        len(record.message),
    )
    return EncodeResponse(qr_code_string=record.encoded_string, data=record)


@app.get("/banks", response_model=list[BankResponse])
def list_banks():
    """Banks offered to clients as BIN choices."""

    return [BankResponse(**bank._asdict()) for bank in BANKS]


@app.get("/banks/{bin_code}", response_model=BankResponse)
def get_bank(bin_code: str):
    bank = find_bank(bin_code)
    if bank is None:
        raise HTTPException(status_code=404, detail="bank not found")
    return BankResponse(**bank._asdict())


@app.get("/metrics")
def metrics():
    """Prometheus scrape endpoint."""

    return metrics_response()


@app.get("/health")
def health():
    """Container health probe endpoint."""

    return {"ok": True}


def run() -> None:
    """Console-script entrypoint: serve the app with uvicorn."""

    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
