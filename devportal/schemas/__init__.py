"""Pydantic request/response schemas for the API routes."""
