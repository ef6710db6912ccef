"""Patchable: declarative partial updates for pydantic models."""

__version__ = "0.1.0"
