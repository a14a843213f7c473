"""HTTP transport for the parking service."""
