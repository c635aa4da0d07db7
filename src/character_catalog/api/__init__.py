"""HTTP API for the character catalog."""
