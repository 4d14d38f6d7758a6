"""Static data and seed records."""

from app.data.seed import build_seed

__all__ = ["build_seed"]
