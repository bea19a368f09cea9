from fastapi import HTTPException, status


class ValidationError(HTTPException):
    """Missing or malformed required field."""

    def __init__(self, detail: str = "Invalid data"):
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class Unauthorized(HTTPException):
    """Missing or invalid credential."""

    def __init__(self, detail: str = "Not authorized"):
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"}
        )


class Forbidden(HTTPException):
    """Valid credential, insufficient role."""

    def __init__(self, detail: str = "Forbidden"):
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class NotFound(HTTPException):
    def __init__(self, detail: str = "Not found"):
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ExternalServiceError(HTTPException):
    """Image host or geocoder failure."""

    def __init__(self, detail: str = "External service failed"):
        super().__init__(status_code=status.HTTP_502_BAD_GATEWAY, detail=detail)
