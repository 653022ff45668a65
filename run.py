#!/usr/bin/env python3
"""Run script for the Task Management API."""

from taskmanager.__main__ import main

if __name__ == "__main__":
    main()
