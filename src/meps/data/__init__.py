"""Static reference tables."""
