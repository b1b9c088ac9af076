"""Output formatting for ServiceResult payloads."""
