import logging
from functools import lru_cache
from typing import Optional

import httpx
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .config import get_settings
from .adapters import PaymentAdapter
from .adapters.exceptions import ConfigurationError, PaymentProcessingError, ValidationError
from .adapters.mundipagg import MundipaggAdapter
from .models import GatewayResponse, PaymentInstrument, TransactionOptions

settings = get_settings()

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger("mundipagg-service")


class EndpointFilter(logging.Filter):
    """Filter out noisy health check access logs."""

    def filter(self, record: logging.LogRecord) -> bool:  # pragma: no cover - logging filter
        return "GET /health" not in record.getMessage()


logging.getLogger("uvicorn.access").addFilter(EndpointFilter())


@lru_cache(maxsize=1)
def get_provider() -> PaymentAdapter:
    config = get_settings()
    return MundipaggAdapter(
        config.MUNDIPAGG_API_KEY,
        enable_test_mode=config.MUNDIPAGG_TEST_MODE,
        default_currency=config.DEFAULT_CURRENCY,
        base_url=config.MUNDIPAGG_BASE_URL,
        timeout=config.REQUEST_TIMEOUT,
    )


class ChargeRequestBody(BaseModel):
    amount: int = Field(gt=0)
    payment: PaymentInstrument
    options: TransactionOptions = Field(default_factory=TransactionOptions)


class VerifyRequestBody(BaseModel):
    payment: PaymentInstrument
    options: TransactionOptions = Field(default_factory=TransactionOptions)


class RefundRequestBody(BaseModel):
    amount: int = Field(gt=0)
    options: TransactionOptions = Field(default_factory=TransactionOptions)


class FollowUpRequestBody(BaseModel):
    amount: Optional[int] = Field(default=None, gt=0)
    options: TransactionOptions = Field(default_factory=TransactionOptions)


app = FastAPI(
    title="Mundipagg Payment Service",
    version="1.0.0",
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(ConfigurationError)
async def configuration_error_handler(request: Request, exc: ConfigurationError):
    logger.error("Service misconfigured, cannot serve %s: %s", request.url.path, exc)
    return JSONResponse(status_code=503, content={"detail": "Payment provider is not configured"})


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    logger.warning("Rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(PaymentProcessingError)
async def processing_error_handler(request: Request, exc: PaymentProcessingError):
    logger.error("Processor error on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": str(exc)})


@app.exception_handler(httpx.HTTPError)
async def transport_error_handler(request: Request, exc: httpx.HTTPError):
    logger.error("Processor unreachable on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=502, content={"detail": f"Processor unreachable: {exc}"})


@app.get("/health")
async def health_check():
    return {"status": "healthy", "service": "mundipagg-service"}


@app.get("/")
async def root(provider: PaymentAdapter = Depends(get_provider)):
    return {
        "message": "Mundipagg Payment Service API",
        "gateway": provider.DISPLAY_NAME,
        "homepage_url": provider.HOMEPAGE_URL,
        "default_currency": provider.DEFAULT_CURRENCY,
        "supported_countries": provider.SUPPORTED_COUNTRIES,
        "supported_cardtypes": provider.SUPPORTED_CARDTYPES,
    }


@app.post("/payments/purchase", response_model=GatewayResponse)
async def purchase(body: ChargeRequestBody, provider: PaymentAdapter = Depends(get_provider)):
    return await provider.purchase(body.amount, body.payment, body.options)


@app.post("/payments/authorize", response_model=GatewayResponse)
async def authorize(body: ChargeRequestBody, provider: PaymentAdapter = Depends(get_provider)):
    return await provider.authorize(body.amount, body.payment, body.options)


@app.post("/payments/verify", response_model=GatewayResponse)
async def verify(body: VerifyRequestBody, provider: PaymentAdapter = Depends(get_provider)):
    return await provider.verify(body.payment, body.options)


@app.post("/payments/{authorization}/capture", response_model=GatewayResponse)
async def capture(
    authorization: str,
    body: Optional[FollowUpRequestBody] = None,
    provider: PaymentAdapter = Depends(get_provider),
):
    body = body or FollowUpRequestBody()
    return await provider.capture(authorization, body.amount, body.options)


@app.post("/payments/{authorization}/refund", response_model=GatewayResponse)
async def refund(
    authorization: str,
    body: RefundRequestBody,
    provider: PaymentAdapter = Depends(get_provider),
):
    return await provider.refund(body.amount, authorization, body.options)


@app.post("/payments/{authorization}/void", response_model=GatewayResponse)
async def void(
    authorization: str,
    body: Optional[FollowUpRequestBody] = None,
    provider: PaymentAdapter = Depends(get_provider),
):
    body = body or FollowUpRequestBody()
    return await provider.void(authorization, body.options)


if __name__ == "__main__":
    uvicorn.run(
        "mundipagg_service.main:app",
        host="0.0.0.0",
        port=settings.HTTP_PORT,
        reload=True,
        log_level="info"
    )
