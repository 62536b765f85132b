"""HTTP API for the lure catalog."""
