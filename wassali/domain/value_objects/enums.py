"""Domain enums — pure Python, no external dependencies."""

from enum import Enum


class Slot(str, Enum):
    PICKUP = "pickup"
    DROPOFF = "dropoff"


class SelectionState(str, Enum):
    AWAITING_PICKUP = "awaiting_pickup"
    AWAITING_DROPOFF = "awaiting_dropoff"
    ROUTE_READY = "route_ready"
