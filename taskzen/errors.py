
class TaskServiceError(Exception):
    status_code = 500
    detail = "Internal server error"

    def __init__(self, detail: str = None):
        self.detail = detail or self.detail
        super().__init__(self.detail)


class InvalidIdentity(TaskServiceError):
    status_code = 400
    detail = "Invalid task id"


class InvalidRequest(TaskServiceError):
    status_code = 400
    detail = "Invalid request data"


class TaskNotFound(TaskServiceError):
    # same response as AccessDenied
    status_code = 403
    detail = "Access denied"


class AccessDenied(TaskServiceError):
    status_code = 403
    detail = "Access denied"


class StorageFailure(TaskServiceError):
    status_code = 500
    detail = "Storage operation failed"
