"""Simulated network latency for store operations."""

import asyncio


class Latency:
    """
    Per-operation delay profile.

    Values are milliseconds; ``scale`` multiplies every delay so tests can
    run with ``scale=0``.
    """

    def __init__(self, scale: float = 1.0, **delays_ms: int):
        self.scale = scale
        self.delays_ms = delays_ms

    @classmethod
    def from_settings(cls, settings) -> "Latency":
        """Build a profile from the ``LATENCY_*_MS`` settings."""
        delays = {}
        for field, value in settings.model_dump().items():
            if field.startswith("LATENCY_") and field.endswith("_MS"):
                delays[field[len("LATENCY_"):-len("_MS")].lower()] = value
        return cls(scale=settings.LATENCY_SCALE, **delays)

    def seconds(self, operation: str) -> float:
        return self.delays_ms.get(operation, 0) * self.scale / 1000

    async def wait(self, operation: str) -> None:
        """Sleep for the configured delay of ``operation``."""
        delay = self.seconds(operation)
        if delay > 0:
            await asyncio.sleep(delay)
