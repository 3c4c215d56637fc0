"""Reset or overwrite Kubernetes node status conditions."""

__version__ = "0.1.0"
