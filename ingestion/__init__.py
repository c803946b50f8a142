"""CSV ingestion for people records."""
