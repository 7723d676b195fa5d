"""Search engine and the deduplication pipeline on top of it."""
