"""Liveness probe for Kubernetes ConfigMap and Secret volume mounts."""

__version__ = "0.1.0"
