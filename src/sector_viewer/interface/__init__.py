"""Terminal presentation layer for the sector viewer."""
