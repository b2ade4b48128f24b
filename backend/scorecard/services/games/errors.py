class GameError(Exception):
    """Base error for game operations; carries the HTTP status to respond with."""
    status_code = 400

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class ValidationError(GameError):
    status_code = 400


class ConflictError(GameError):
    """The game is not in a state that allows the requested operation."""
    status_code = 400


class ForbiddenError(GameError):
    status_code = 403


class NotFoundError(GameError):
    status_code = 404
