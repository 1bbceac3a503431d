"""Fake-data seeding for the catalog store."""

from .seeds import DEMO_EMAIL, SeedSummary, seed_database

__all__ = ["seed_database", "SeedSummary", "DEMO_EMAIL"]
