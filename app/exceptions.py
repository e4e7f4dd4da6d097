class ApiError(Exception):
    """Base class for every failure reported to API callers.

    ``status_code`` is the HTTP status the error handler responds with and
    ``reason`` is a stable machine-readable code. Subclasses that represent
    unexpected faults set ``is_fault`` so they are logged as errors instead
    of ordinary rejections.
    """

    status_code = 400
    reason = "bad_request"
    default_message = "Request could not be completed"
    is_fault = False

    def __init__(self, message=None):
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    def to_dict(self):
        return {"message": f"Error: {self.message}", "reason": self.reason}


class UnauthenticatedError(ApiError):
    status_code = 401
    reason = "unauthenticated"
    default_message = "User not authenticated"


class NotFoundError(ApiError):
    status_code = 404
    reason = "not_found"
    default_message = "Resource not found"


class UserNotFoundError(NotFoundError):
    reason = "user_not_found"
    default_message = "User not found in database"


class EventNotFoundError(NotFoundError):
    reason = "event_not_found"
    default_message = "Event not found"


class ParticipantNotFoundError(NotFoundError):
    default_message = "Registration not found"


class ChildNotFoundError(NotFoundError):
    reason = "child_not_found"
    default_message = "Child not found"


class ForbiddenError(ApiError):
    status_code = 403
    reason = "forbidden"
    default_message = "Access denied"


class ConflictError(ApiError):
    reason = "conflict"


class DuplicateRegistrationError(ConflictError):
    reason = "duplicate_registration"
    default_message = "Child already registered for this event"


class EventFullError(ConflictError):
    reason = "event_full"
    default_message = "Event is at full capacity"


class EventAlreadyOccurredError(ConflictError):
    reason = "event_already_occurred"
    default_message = "Cannot cancel registration for past events"


class DuplicateVolunteerError(ConflictError):
    reason = "duplicate_volunteer"
    default_message = "Already signed up to volunteer for this event"


class MissingFieldsError(ApiError):
    reason = "missing_fields"

    def __init__(self, fields):
        super().__init__(f"Missing required fields: {', '.join(fields)}")
        self.fields = fields

    def to_dict(self):
        body = super().to_dict()
        body["missing_fields"] = self.fields
        return body


class InvalidFieldError(ApiError):
    reason = "invalid_field"

    def __init__(self, field, message=None):
        super().__init__(message or f"Invalid value for {field}")
        self.field = field


class InternalError(ApiError):
    status_code = 500
    reason = "internal_error"
    default_message = "Internal server error"
    is_fault = True


class RegistrationFailedError(InternalError):
    status_code = 400
    reason = "registration_failed"

    def __init__(self, cause):
        super().__init__(f"Failed to register for event - {cause}")


class CancellationFailedError(InternalError):
    status_code = 400
    reason = "cancellation_failed"

    def __init__(self, cause):
        super().__init__(f"Failed to cancel registration - {cause}")
