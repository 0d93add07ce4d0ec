"""Output writing."""
