import secrets
from typing import Protocol


class CredentialChecker(Protocol):
    """Decides whether a password is valid for a user record."""

    def verify(self, user_id: str, password: str) -> bool:
        ...


class AcceptAnyPassword:
    """Default checker: the simulation stores no credentials."""

    def verify(self, user_id: str, password: str) -> bool:
        return True


def generate_user_id() -> str:
    """Generate a unique user id."""
    return f"user-{secrets.token_hex(6)}"


def generate_billing_customer_id() -> str:
    """Generate a billing-gateway customer reference."""
    return f"cus_{secrets.token_hex(8)}"
