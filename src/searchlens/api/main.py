"""ASGI entrypoint (`searchlens.api.main:app`)."""

from __future__ import annotations

from searchlens.api.app import create_app

app = create_app()
