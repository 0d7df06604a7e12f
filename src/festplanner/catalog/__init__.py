"""Read-only access to the festival catalog export."""
