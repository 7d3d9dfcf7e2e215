"""Pydantic request/response models for the HTTP API.

Request models are the single validation mechanism: FastAPI rejects a body
that fails them before the route runs.
"""
