"""In-memory repositories for bookings and clients."""

from __future__ import annotations

import logging
from datetime import date

from call_scheduler.domain.models import Booking, Client

logger = logging.getLogger(__name__)


class BookingRepository:
    """Dict-backed store for Booking instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Booking] = {}

    def add(self, booking: Booking) -> None:
        self._store[booking.id] = booking

    def get(self, booking_id: str) -> Booking | None:
        return self._store.get(booking_id)

    def list_all(self) -> list[Booking]:
        return list(self._store.values())

    def list_by_date(self, day: date) -> list[Booking]:
        return [b for b in self._store.values() if b.date == day]

    def list_recurring(self, weekday: int) -> list[Booking]:
        return [
            b
            for b in self._store.values()
            if b.recurring_pattern is not None
            and b.recurring_pattern.day_of_week == weekday
        ]

    def delete(self, booking_id: str) -> None:
        # One record holds a whole recurring series, so this removes every
        # occurrence at once.
        self._store.pop(booking_id, None)


class ClientRepository:
    """Dict-backed store for Client instances, keyed by id."""

    def __init__(self) -> None:
        self._store: dict[str, Client] = {}

    def add(self, client: Client) -> None:
        self._store[client.id] = client

    def list_all(self) -> list[Client]:
        return list(self._store.values())

    def search(self, term: str) -> list[Client]:
        """Case-insensitive substring match on name or phone."""
        if not term:
            return self.list_all()
        needle = term.lower()
        return [
            c
            for c in self._store.values()
            if needle in c.name.lower() or needle in c.phone.lower()
        ]


# ---------------------------------------------------------------------------
# Seed data – the demo client list loaded into an empty store
# ---------------------------------------------------------------------------

_DEMO_CLIENTS = [
    ("Sriram Kumar", "+91-9876543210"),
    ("Shilpa Sharma", "+91-9876543211"),
    ("Rahul Verma", "+91-9876543212"),
    ("Priya Patel", "+91-9876543213"),
    ("Amit Singh", "+91-9876543214"),
    ("Neha Gupta", "+91-9876543215"),
    ("Vikram Rao", "+91-9876543216"),
    ("Kavya Reddy", "+91-9876543217"),
    ("Arjun Nair", "+91-9876543218"),
    ("Sneha Iyer", "+91-9876543219"),
    ("Rohit Joshi", "+91-9876543220"),
    ("Meera Khanna", "+91-9876543221"),
    ("Karthik Pillai", "+91-9876543222"),
    ("Anita Agarwal", "+91-9876543223"),
    ("Deepak Mishra", "+91-9876543224"),
    ("Ritu Kapoor", "+91-9876543225"),
    ("Suresh Chandra", "+91-9876543226"),
    ("Pooja Bansal", "+91-9876543227"),
    ("Manish Tiwari", "+91-9876543228"),
    ("Divya Saxena", "+91-9876543229"),
]


def seed_clients(repo: ClientRepository) -> int:
    """Load the demo clients if *repo* is empty. Returns how many were added."""
    if repo.list_all():
        return 0
    for name, phone in _DEMO_CLIENTS:
        repo.add(Client(name=name, phone=phone))
    logger.info("Seeded %d demo clients", len(_DEMO_CLIENTS))
    return len(_DEMO_CLIENTS)


def create_client_repository(seed: bool = True) -> ClientRepository:
    """Return a ClientRepository, pre-loaded with demo clients when *seed*."""
    repo = ClientRepository()
    if seed:
        seed_clients(repo)
    return repo
