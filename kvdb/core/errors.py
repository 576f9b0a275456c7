"""
Request-level errors

Each error carries the HTTP status and the plain-text body sent back to
the client. The application turns them into responses in one handler.
"""


class KvdbError(Exception):
    status_code: int = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidActionError(KvdbError):
    status_code = 422

    def __init__(self):
        super().__init__("Incorrect value for parameter 'action'")


class MissingFieldError(KvdbError):
    status_code = 422

    def __init__(self, field: str):
        super().__init__(f"Missing '{field}' field")
        self.field = field


class UnsupportedActionError(KvdbError):
    status_code = 405

    def __init__(self):
        super().__init__("Only supports POST, GET, and DELETE")
