"""Core services: API access, session storage and path resolution."""
