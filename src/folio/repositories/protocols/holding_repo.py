"""Holding repository protocol."""

from typing import Protocol, Optional

from folio.domain.models import Holding


class HoldingRepository(Protocol):
    """Interface for owner-scoped holding data access."""

    def create(self, holding: Holding) -> Holding:
        """Persist a new holding."""
        ...

    def get_for_owner(self, holding_id: str, owner_id: str) -> Optional[Holding]:
        """Retrieve a holding only if it belongs to owner_id."""
        ...

    def list_by_owner(self, owner_id: str) -> list[Holding]:
        """List an owner's holdings, newest first."""
        ...

    def update(self, holding: Holding) -> Holding:
        """Update an existing holding."""
        ...

    def delete(self, holding_id: str, owner_id: str) -> bool:
        """Delete an owner's holding; returns False if nothing matched."""
        ...
