"""Transplantify Directory - in-memory backend for the clinic directory frontend."""

import uvicorn

from app.config import settings
from app.main import app  # noqa: F401


if __name__ == "__main__":
    uvicorn.run(
        "app.main:app",
        host="0.0.0.0",
        port=settings.PORT,
        reload=settings.DEBUG,
    )
