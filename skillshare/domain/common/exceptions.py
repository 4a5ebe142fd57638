"""
Errors raised by entities and domain services.

They signal that a plan tree or a user would end up in a state the model
forbids. main.py answers them with 400; the application layer has its own
typed errors for lookups and permissions.
"""


class DomainError(Exception):
    """Root of the domain errors. `context` holds the offending attribute values."""

    def __init__(self, message: str, **context: object) -> None:
        super().__init__(message)
        self.message = message
        self.context = context

    def __str__(self) -> str:
        if not self.context:
            return self.message
        pairs = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({pairs})"


class ValidationError(DomainError):
    """An attribute is out of range, such as a blank title or a negative estimate."""

    def __init__(self, message: str, field: str | None = None, value: object = None) -> None:
        context: dict[str, object] = {"field": field} if field else {}
        if value is not None:
            context["value"] = value
        super().__init__(message, **context)
        self.field = field
        self.value = value


class BusinessRuleViolationError(DomainError):
    """A named rule refused the operation, e.g. cloning a plan that is not a template."""

    def __init__(self, rule: str, message: str | None = None) -> None:
        super().__init__(message or f"Rule '{rule}' violated", rule=rule)
        self.rule = rule
