"""Service layer for the WhyCookIn API."""
