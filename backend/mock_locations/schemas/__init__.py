"""Pydantic schemas for the mock locations service."""
