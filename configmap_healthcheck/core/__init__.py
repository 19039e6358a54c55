"""Configuration, errors and logging shared by the service."""
