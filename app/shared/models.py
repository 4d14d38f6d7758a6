from datetime import date
from typing import Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError

from app.shared.exceptions import ValidationFailedException


T = TypeVar("T", bound="StoreModel")


class StoreModel(BaseModel):
    """Base record held by the in-memory store."""

    model_config = ConfigDict(validate_assignment=True)

    def clone(self: T) -> T:
        """Return a deep copy detached from this record."""
        return self.model_copy(deep=True)

    @classmethod
    def build(cls: Type[T], **data) -> T:
        """Validate ``data`` into a record, raising the store's validation error."""
        try:
            return cls(**data)
        except ValidationError as e:
            errors = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
            )
            raise ValidationFailedException(f"Invalid {cls.__name__}: {errors}")


def today() -> str:
    """Current date as an ISO string (YYYY-MM-DD)."""
    return date.today().isoformat()
