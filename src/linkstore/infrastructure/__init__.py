"""Infrastructure layer: SQL engine, schema and the link repository."""
