"""Domain types for link records: pure data and mapping, no infrastructure."""
