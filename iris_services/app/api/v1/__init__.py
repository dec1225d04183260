"""Version 1 of the local API, mirroring the deployed gateway routes."""
