"""Flask front end for the acroname engine."""
from __future__ import annotations
from .web import app, main

__all__ = ["app", "main"]
