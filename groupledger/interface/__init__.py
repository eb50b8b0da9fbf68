"""Mini README: Interactive interfaces for groupledger.

Exports the FastAPI application factory that exposes the ledger session to
browser or mobile front ends.
"""

from .web_app import create_application

__all__ = ["create_application"]
