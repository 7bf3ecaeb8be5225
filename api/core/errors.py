"""
Domain errors shared by the feature packages.

Each error carries the HTTP status it maps to; `main.py` registers a single
handler that renders them as `{"error": "<message>"}`.
"""

from __future__ import annotations


class AirPropError(RuntimeError):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(AirPropError):
    status_code = 400


class NotFoundError(AirPropError):
    status_code = 404


class ConflictError(AirPropError):
    status_code = 409


# Store failures pass the driver's message through unchanged.
class StoreError(AirPropError):
    status_code = 500
