"""Core building blocks for date range filters."""
