"""
Dependency injection for the reference tender service routes.

The service instance lives on ``app.state`` so each app built by
``build_app`` (tests build one per case) has its own catalog and favorites.
"""

from __future__ import annotations

from fastapi import Request

from tender_sync.adapters.in_memory_tender_service import InMemoryTenderService


def get_tender_service(request: Request) -> InMemoryTenderService:
    """
    Returns the tender service bound to the running app.

    Args:
        request: Current request (gives access to ``app.state``)

    Returns:
        InMemoryTenderService: Catalog and favorites store
    """
    return request.app.state.tender_service
