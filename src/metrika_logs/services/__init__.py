"""Workflow services built on top of the HTTP API."""
