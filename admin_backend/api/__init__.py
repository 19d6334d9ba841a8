"""REST API for the admin backend."""
