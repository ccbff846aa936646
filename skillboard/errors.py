"""Error taxonomy shared by the services, the HTTP layer and the client.

Services raise these; routers translate them into ``HTTPException`` with
the matching ``status_code``. The API client maps response codes back onto
the same classes so callers handle one set of exceptions on both sides.
"""


class SkillBoardError(Exception):
    status_code = 500

    def __init__(self, message: str = ""):
        super().__init__(message)
        self.message = message or self.__class__.__name__


class InvalidArgument(SkillBoardError, ValueError):
    """Bad page/limit, empty skill name, malformed request data."""

    status_code = 400


class NotAuthenticated(SkillBoardError):
    status_code = 401


class PermissionDenied(SkillBoardError):
    status_code = 403


class NotFound(SkillBoardError):
    status_code = 404


class UpstreamFailure(SkillBoardError):
    """The profile store (or the API, seen from the client) is unreachable."""

    status_code = 503


ERRORS_BY_STATUS = {
    cls.status_code: cls
    for cls in (
        InvalidArgument,
        NotAuthenticated,
        PermissionDenied,
        NotFound,
        UpstreamFailure,
    )
}


def error_for_status(status_code: int, message: str) -> SkillBoardError:
    """Build the exception matching an HTTP status code."""
    cls = ERRORS_BY_STATUS.get(status_code)
    if cls is None:
        cls = InvalidArgument if status_code == 422 else UpstreamFailure
    return cls(message)
