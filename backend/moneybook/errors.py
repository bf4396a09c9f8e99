"""
Error taxonomy for the master data and money layers.

Every error carries a message that can be shown to the user as-is. Views turn
them into JSON error bodies using ``code`` and ``status``.
"""


class MoneybookError(Exception):
    code = "BAD_REQUEST"
    status = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def as_dict(self):
        return {"code": self.code, "message": self.message}


class NotFoundError(MoneybookError):
    code = "NOT_FOUND"
    status = 404


class ConflictError(MoneybookError):
    code = "CONFLICT"
    status = 409

    def __init__(self, message, field=None):
        super().__init__(message)
        self.field = field

    def as_dict(self):
        payload = super().as_dict()
        if self.field:
            payload["field"] = self.field
        return payload


class InvalidStateError(MoneybookError):
    code = "INVALID_STATE"
    status = 409

    def __init__(self, message, reference_count=None):
        super().__init__(message)
        self.reference_count = reference_count

    def as_dict(self):
        payload = super().as_dict()
        if self.reference_count is not None:
            payload["reference_count"] = self.reference_count
        return payload


class ImmutableFieldError(MoneybookError):
    code = "IMMUTABLE_FIELD"
    status = 400

    def __init__(self, message, field):
        super().__init__(message)
        self.field = field

    def as_dict(self):
        payload = super().as_dict()
        payload["field"] = self.field
        return payload


class PreconditionError(MoneybookError):
    code = "PRECONDITION_FAILED"
    status = 412


class ParseError(MoneybookError, ValueError):
    code = "PARSE_ERROR"


class DivisionByZero(MoneybookError, ZeroDivisionError):
    code = "DIVISION_BY_ZERO"
