"""Task Management API: an in-memory task tracker served over HTTP."""

from taskmanager.models.constants import API_VERSION

__version__ = API_VERSION
