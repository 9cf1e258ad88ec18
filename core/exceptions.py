from fastapi import HTTPException, status


class TournamentException(HTTPException):
    def __init__(self, detail: str, status_code: int = status.HTTP_400_BAD_REQUEST):
        super().__init__(status_code=status_code, detail=detail)


class ValidationFailed(TournamentException):
    def __init__(self, detail: str = "Validation failed"):
        super().__init__(detail)


class TournamentNotFound(TournamentException):
    def __init__(self):
        super().__init__("Tournament not found", status.HTTP_404_NOT_FOUND)


class RegistrationNotFound(TournamentException):
    def __init__(self):
        super().__init__("Registration not found", status.HTTP_404_NOT_FOUND)


class TournamentFull(TournamentException):
    def __init__(self):
        super().__init__("Tournament is full")


class TournamentClosed(TournamentException):
    def __init__(self, detail: str = "Tournament registration is closed"):
        super().__init__(detail)


class BulkLimitExceeded(TournamentException):
    def __init__(self, limit: int):
        super().__init__(f"Cannot process more than {limit} registrations at once")


class AuthenticationFailed(TournamentException):
    def __init__(self, detail: str = "Authentication failed"):
        super().__init__(detail, status.HTTP_401_UNAUTHORIZED)
        self.headers = {"WWW-Authenticate": "Bearer"}
