"""FastAPI application — entry point for the call scheduling service."""

from __future__ import annotations

import logging

from fastapi import APIRouter, FastAPI, HTTPException, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from call_scheduler import config
from call_scheduler.domain.errors import (
    BookingValidationError,
    SlotConflictError,
    StorageUnavailableError,
)
from call_scheduler.domain.models import (
    Booking,
    CalendarDay,
    CalendarStats,
    Client,
    CreateBookingRequest,
    HealthResponse,
    parse_day,
)
from call_scheduler.repos.memory import BookingRepository, create_client_repository
from call_scheduler.services import bookings

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Call Scheduling Service")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
)

# ── Singletons (created at import time for simplicity) ────────────────
booking_repo = BookingRepository()
client_repo = create_client_repository(seed=config.SEED_CLIENTS)

router = APIRouter(prefix=config.API_PREFIX)


# ── Error handling ────────────────────────────────────────────────────


@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report malformed payloads as 400, the status the booking API promises."""
    logger.warning(f"Validation error for {request.url.path}: {exc.errors()}")
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


@app.exception_handler(BookingValidationError)
async def booking_validation_handler(request: Request, exc: BookingValidationError):
    logger.warning(f"Invalid booking request for {request.url.path}: {exc}")
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.exception_handler(SlotConflictError)
async def slot_conflict_handler(request: Request, exc: SlotConflictError):
    return JSONResponse(status_code=409, content={"detail": exc.reason})


@app.exception_handler(StorageUnavailableError)
async def storage_unavailable_handler(request: Request, exc: StorageUnavailableError):
    logger.exception(f"{request.method} {request.url.path} - Storage error: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def _day_or_400(raw: str):
    try:
        return parse_day(raw)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from None


# ── Routes ────────────────────────────────────────────────────────────


@router.get("/calendar/{date}", response_model=CalendarDay)
def get_calendar_day(date: str) -> CalendarDay:
    """Return the 28-slot grid for *date* with direct and recurring bookings."""
    return bookings.get_calendar_day(_day_or_400(date), booking_repo)


@router.get("/calendar/{date}/stats", response_model=CalendarStats)
def get_calendar_stats(date: str) -> CalendarStats:
    """Return booked-slot counts for *date*."""
    return bookings.get_calendar_stats(_day_or_400(date), booking_repo)


@router.post("/bookings", response_model=Booking, status_code=201)
def create_booking(payload: CreateBookingRequest) -> Booking:
    """Book a call. Follow-up calls repeat weekly from *date* onwards."""
    return bookings.create_booking(payload, booking_repo)


@router.delete("/bookings/{booking_id}", status_code=204)
def delete_booking(booking_id: str) -> Response:
    """Delete a booking; a recurring booking takes its whole series with it."""
    bookings.delete_booking(booking_id, booking_repo)
    return Response(status_code=204)


@router.get("/clients", response_model=list[Client])
def list_clients(search: str | None = None) -> list[Client]:
    """Return all clients, optionally filtered by name or phone."""
    if search:
        return client_repo.search(search)
    return client_repo.list_all()


app.include_router(router)


@app.get("/health", response_model=HealthResponse)
def health() -> HealthResponse:
    return HealthResponse()
