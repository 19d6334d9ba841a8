"""Admin backend: REST administration API over a relational store."""
