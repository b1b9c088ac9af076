"""Service layer: link operations wrapped in the ServiceResult contract."""
