"""Persistence and business rules behind the API routes."""
