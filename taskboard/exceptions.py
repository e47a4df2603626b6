# taskboard/exceptions.py
# Errors raised by the service layer and rendered by exception_handlers


class TaskboardError(Exception):
    status_code = 500
    error = "Internal Server Error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResourceNotFoundError(TaskboardError):
    status_code = 404
    error = "Not Found"


class EmailAlreadyExistsError(TaskboardError):
    status_code = 409
    error = "Conflict"


class InvalidCredentialsError(TaskboardError):
    status_code = 401
    error = "Unauthorized"


class ForbiddenError(TaskboardError):
    status_code = 403
    error = "Forbidden"
