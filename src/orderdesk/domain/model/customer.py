"""Customer entity."""

from __future__ import annotations

from dataclasses import dataclass

from orderdesk.domain.model.product import require_text


@dataclass(frozen=True)
class Customer:
    """A registered customer. Immutable once constructed."""

    id: int
    name: str
    email: str
    tax_id: str

    def __post_init__(self) -> None:
        # frozen: normalise through object.__setattr__
        object.__setattr__(self, "name", require_text(self.name, "Customer name"))
        object.__setattr__(self, "email", require_text(self.email, "Customer email"))
        object.__setattr__(self, "tax_id", require_text(self.tax_id, "Customer tax id"))
