"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class NotAuthorizedError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class InvalidParentCommentError(DomainError):
    """Raised when a reply targets a comment outside the post being replied to."""

    def __init__(self, parent_id: str, post_id: str):
        self.parent_id = parent_id
        self.post_id = post_id
        super().__init__(f"Parent comment {parent_id} does not belong to post {post_id}")


class OrderRejectedError(DomainError):
    """Raised when an order quantity violates the product's ordering rules."""

    def __init__(self, message: str):
        super().__init__(message)
