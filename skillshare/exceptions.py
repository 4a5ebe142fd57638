"""Application exception hierarchy.

These are the typed failures returned by use cases. Each carries the HTTP
status the request layer answers with.
"""

from fastapi import HTTPException
from starlette import status


class SkillshareError(Exception):
    """Base exception for all SkillShare errors."""

    def __init__(self, message: str, status_code: int = 500) -> None:
        """Initialize exception with message and optional status code."""
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class NotFoundError(SkillshareError):
    """Referenced record does not exist within the expected scope."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_404_NOT_FOUND)


class LearningPlanNotFoundError(NotFoundError):
    """Learning plan not found error."""

    def __init__(self, plan_id: int) -> None:
        self.plan_id = plan_id
        super().__init__(f"Learning plan with id {plan_id} not found")


class LearningModuleNotFoundError(NotFoundError):
    """Module id does not exist within the plan."""

    def __init__(self, plan_id: int, module_id: object) -> None:
        self.plan_id = plan_id
        self.module_id = module_id
        super().__init__(f"Module {module_id} not found in learning plan {plan_id}")


class LearningTaskNotFoundError(NotFoundError):
    """Task id does not exist within the module."""

    def __init__(self, module_id: object, task_id: object) -> None:
        self.module_id = module_id
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found in module {module_id}")


class TemplateNotFoundError(NotFoundError):
    """Template not found error."""

    def __init__(self, template_id: int) -> None:
        self.template_id = template_id
        super().__init__(f"Template with id {template_id} not found")


class UserNotFoundError(NotFoundError):
    """User not found error."""

    def __init__(self, user_id: int) -> None:
        self.user_id = user_id
        super().__init__(f"User with id {user_id} not found")


class NotAuthorizedError(SkillshareError):
    """Requester does not own the record they act on."""

    def __init__(self, message: str = "Not authorized to access this learning plan") -> None:
        super().__init__(message, status_code=status.HTTP_403_FORBIDDEN)


class InvalidOperationError(SkillshareError):
    """Operation is not allowed on a record in its current state."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_409_CONFLICT)


class NotATemplateError(InvalidOperationError):
    """Instantiation was requested from a personal plan."""

    def __init__(self, plan_id: int) -> None:
        self.plan_id = plan_id
        super().__init__(f"Learning plan {plan_id} is not a template")


class TemplateMutationError(InvalidOperationError):
    """Templates never receive progress updates."""

    def __init__(self, plan_id: int) -> None:
        self.plan_id = plan_id
        super().__init__(f"Template {plan_id} cannot be modified directly")


class SelfFollowError(InvalidOperationError):
    """Users cannot follow themselves."""

    def __init__(self) -> None:
        super().__init__("Users cannot follow themselves")


class ValidationError(SkillshareError):
    """Validation error."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status_code=status.HTTP_422_UNPROCESSABLE_CONTENT)


CredentialsException = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)
