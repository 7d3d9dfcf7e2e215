"""Application layer: record store port and per-entity services."""
