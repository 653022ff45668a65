"""HTTP layer for the Task Management API."""
