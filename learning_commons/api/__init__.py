"""HTTP API for the Learning Commons engine."""
