"""Blog REST API package."""
