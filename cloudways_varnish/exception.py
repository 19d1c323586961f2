"""
Exceptions used by the Cloudways Varnish client and its command-line script.
"""


class ConfigError(Exception):
    """
    Raised when a required input is missing or invalid. No request has been made.
    """


class BackendError(Exception):
    pass


class AuthenticationError(BackendError):
    pass


class DispatchError(BackendError):
    pass


class OperationTimeoutError(BackendError, TimeoutError):
    """
    Raised when an operation was dispatched but did not report completion in time.
    """
    def __init__(self, operation_id, max_attempts):
        self.operation_id = operation_id
        self.max_attempts = max_attempts
        self.message = (
            f"Operation timed out after {max_attempts} attempts (ID: {operation_id}). "
            "The Varnish action was dispatched and may still complete on the server."
        )
        super().__init__(self.message)

    def __str__(self):
        return self.message
