"""
FastAPI REST API Module

Exposes the balance ledger over HTTP: view the balance, credit and debit.
Each app owns one ledger; concurrent requests are serialized by the
ledger's own lock.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Union
from fastapi import FastAPI, HTTPException, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, StrictFloat, StrictInt, StrictStr
import uvicorn

from . import __version__
from .cli import INVALID_AMOUNT_MESSAGE
from .config import get_config
from .errors import OperationResult
from .ledger import BalanceLedger, balance_message
from .logging_config import get_logger
from .money import decimal_from_string, to_decimal

logger = get_logger(__name__)


class AmountRequest(BaseModel):
    amount: Union[StrictStr, StrictInt, StrictFloat] = Field(
        ..., description="Amount as a decimal string (\"250.00\") or a JSON number"
    )

    def to_decimal(self) -> Decimal:
        try:
            if isinstance(self.amount, str):
                return decimal_from_string(self.amount)
            return to_decimal(self.amount)
        except ValueError:
            raise HTTPException(status_code=400, detail=INVALID_AMOUNT_MESSAGE) from None


class BalanceResponse(BaseModel):
    balance: str
    message: str


class OperationResponse(BaseModel):
    success: bool
    message: str
    balance: str
    error: Optional[str] = None


def get_ledger(request: Request) -> BalanceLedger:
    return request.app.state.ledger


def _respond(result: OperationResult) -> OperationResponse:
    if not result.success:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=result.to_dict())
    return OperationResponse(**result.to_dict())


def create_app(ledger: Optional[BalanceLedger] = None) -> FastAPI:
    """Create and configure the FastAPI application"""
    app = FastAPI(
        title="Student Accounts API",
        description="Single-balance account with validated credits and debits",
        version=__version__,
        docs_url="/docs",
        redoc_url="/redoc"
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    if ledger is None:
        ledger = BalanceLedger(get_config().initial_balance)
    app.state.ledger = ledger

    @app.get("/health")
    async def health_check():
        """Health check endpoint"""
        return {"status": "healthy", "timestamp": datetime.now(timezone.utc).isoformat()}

    @app.get("/")
    async def root():
        """Root endpoint with system information"""
        return {
            "system": "Student Accounts",
            "version": __version__,
            "endpoints": {
                "docs": "/docs",
                "health": "/health",
                "balance": "/balance",
                "credit": "/credit",
                "debit": "/debit"
            }
        }

    @app.get("/balance", response_model=BalanceResponse)
    def view_balance(ledger: BalanceLedger = Depends(get_ledger)):
        """Current balance"""
        formatted = ledger.formatted_balance
        return BalanceResponse(balance=formatted, message=balance_message(formatted))

    @app.post("/credit", response_model=OperationResponse)
    def credit(request: AmountRequest, ledger: BalanceLedger = Depends(get_ledger)):
        """Add money to the account"""
        return _respond(ledger.credit(request.to_decimal()))

    @app.post("/debit", response_model=OperationResponse)
    def debit(request: AmountRequest, ledger: BalanceLedger = Depends(get_ledger)):
        """Subtract money from the account"""
        return _respond(ledger.debit(request.to_decimal()))

    return app


def run_server(host: str = "0.0.0.0", port: int = 8090, debug: bool = False):
    """Run the FastAPI server"""
    logger.info("Starting API on %s:%s", host, port)
    uvicorn.run(
        "student_accounts.api:create_app",
        factory=True,
        host=host,
        port=port,
        reload=debug,
        log_level="info"
    )
