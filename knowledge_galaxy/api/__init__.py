"""HTTP API for Knowledge Galaxy."""
