"""HTTP surface for the word analyzer (Flask)."""
from __future__ import annotations
from .web import create_app, main

__all__ = ["create_app", "main"]
