"""HTTP surface of the healthcheck."""
