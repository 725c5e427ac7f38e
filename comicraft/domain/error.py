"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class InvalidCommunityNameError(ValidationError):
    """Raised when a community name fails the naming rules."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            "Community name should be at least 3-21 characters long "
            "and should not contain special characters."
        )


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class CommunityAlreadyExistsError(BusinessRuleViolationError):
    """Raised when creating a community whose name is taken."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(
            f"Sorry, c/{name} already exists. Please choose a different name."
        )


class AlreadyMemberError(BusinessRuleViolationError):
    """Raised when joining a community the user already belongs to."""

    def __init__(self, community_id: str, user_id: str):
        super().__init__(f"User {user_id} is already a member of c/{community_id}")


class NotMemberError(BusinessRuleViolationError):
    """Raised when an action requires membership the user does not have."""

    def __init__(self, community_id: str, user_id: str):
        super().__init__(f"User {user_id} is not a member of c/{community_id}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PostImageUploadError(DomainError):
    """Raised when a post's image could not be stored.

    The post itself is rolled back, so no image-less post is left behind.
    """

    def __init__(self, post_id: str, reason: str):
        self.post_id = post_id
        super().__init__(f"Failed to upload image for post {post_id}: {reason}")
