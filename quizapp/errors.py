class QuizError(Exception):
    """Base error rendered by the app as ``{"error": message}``."""
    status_code = 500
    message = 'Internal Server Error'

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message is not None:
            self.message = message


class ValidationError(QuizError):
    """A required request field is missing or empty."""
    status_code = 400
    message = 'Dados inválidos'


class AuthError(QuizError):
    """Admin password did not match."""
    status_code = 401
    message = 'unauthorized'
