"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Malformed or missing action parameters."""

    pass


class InvalidReferenceError(ValidationError):
    """Raised when two referenced entities do not belong together."""

    def __init__(self, resource: str, resource_id: str, parent: str, parent_id: str):
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} {resource_id} does not belong to {parent} {parent_id}")


class NotFoundError(DomainError):
    """Raised when a requested resource does not exist or is soft-deleted."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when the acting user lacks the required relationship to a resource."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class InfrastructureError(DomainError):
    """Persistence layer unavailable or a write failed.

    Repository implementations raise this so domain services never depend on
    driver exceptions.
    """

    pass
