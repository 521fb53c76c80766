"""Resolve and classify the client IP address of HTTP requests."""
