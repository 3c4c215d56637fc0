"""Custom exceptions for clear-conditions.

Errors come in two tiers. A ``FatalError`` stops the whole run. An
``ItemError`` is recorded against a single node and the batch carries on.
"""


class ClearConditionsError(Exception):
    """Base exception for all clear-conditions errors."""

    def __init__(self, message: str, details: str = None):
        """Initialize the exception.

        Args:
            message: Main error message
            details: Additional details or suggestions
        """
        self.message = message
        self.details = details
        super().__init__(self.format_message())

    def format_message(self) -> str:
        """Format the complete error message.

        Returns:
            Formatted error message with details
        """
        if self.details:
            return f"{self.message}\n\nDetails: {self.details}"
        return self.message


class FatalError(ClearConditionsError):
    """Exception that aborts the whole run."""

    pass


class ItemError(ClearConditionsError):
    """Exception scoped to a single node; the run continues."""

    def __init__(self, node: str, message: str, details: str = None):
        self.node = node
        super().__init__(message, details)


class ConfigurationError(FatalError):
    """Exception raised for kubeconfig and client construction errors."""

    pass


class KubernetesError(FatalError):
    """Exception raised for Kubernetes API errors that stop the batch."""

    pass


class NodeFetchError(KubernetesError):
    """Exception raised when a node cannot be read from the cluster."""

    def __init__(self, node: str, message: str, details: str = None):
        self.node = node
        super().__init__(message, details)


class NodeUpdateError(ItemError):
    """Exception raised when a node status update is rejected."""

    pass
