class ApigateError(Exception):
    """Base class for errors raised while compiling API Gateway events."""


class InvalidConfigShape(ApigateError):
    """Raised when a manifest or provider setting has the wrong structure."""


class InvalidEventShape(ApigateError):
    """Raised when an HTTP event is neither a mapping nor a "METHOD path" string."""

    def __init__(self, function_name: str, message: str):
        self.function_name = function_name
        super().__init__(message)


class MalformedIdentifier(ApigateError):
    """Raised when a route resource logical id cannot be used to derive method ids."""

    def __init__(self, path: str, logical_id: str | None):
        self.path = path
        self.logical_id = logical_id
        if logical_id is None:
            message = f"No route resource logical id found for path '{path}'"
        else:
            message = (
                f"Route resource logical id '{logical_id}' for path '{path}' "
                "does not end with a numeric suffix"
            )
        super().__init__(message)


class ResourceConflict(ApigateError):
    """Raised when merging would replace a resource of a different type."""

    def __init__(self, logical_id: str, existing_type: str | None, new_type: str | None):
        self.logical_id = logical_id
        self.existing_type = existing_type
        self.new_type = new_type
        super().__init__(
            f"Resource '{logical_id}' already exists with type '{existing_type}', "
            f"refusing to merge resource of type '{new_type}'"
        )
