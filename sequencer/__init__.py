"""Element sequencing and versioning API."""
