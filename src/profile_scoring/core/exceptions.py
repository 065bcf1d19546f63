"""
Custom Exception Hierarchy
Domain and application-level exceptions
"""


class DomainException(Exception):
    """Base exception for all domain errors"""
    pass


class ValidationException(DomainException):
    """Data validation failed"""

    def __init__(self, field: str, message: str):
        self.field = field
        self.message = message
        super().__init__(f"{field}: {message}")


class RepositoryException(DomainException):
    """Storage operation failed"""
    pass


class ResourceNotFoundException(DomainException):
    """Requested resource not found"""

    def __init__(self, resource_type: str, identifier: str):
        self.resource_type = resource_type
        self.identifier = identifier
        super().__init__(f"{resource_type} not found: {identifier}")


class ProfileNotFoundException(ResourceNotFoundException):
    """No profile aggregate could be resolved for the given user(s)"""

    def __init__(self, identifier: str):
        super().__init__("Profile", identifier)


class IncompleteProfileException(DomainException):
    """Profile completion is below the required minimum"""

    def __init__(self, user_id, completion_percentage: int, message: str):
        self.user_id = user_id
        self.completion_percentage = completion_percentage
        super().__init__(message)


class IncompatibleGenderException(DomainException):
    """Gender information missing or both users share the same gender"""
    pass
