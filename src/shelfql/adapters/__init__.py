"""Framework adapters for shelfql."""
