"""Error taxonomy shared by the services and the HTTP layer.

Services raise these; ``ideabank.main`` maps each family to a status code in
one place, so routes never build error responses themselves.
"""


class AppError(Exception):
    status_code = 500
    default_message = "Erro interno do servidor"

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationError(AppError):
    """Required input is missing."""

    status_code = 400
    default_message = "Dados inválidos"


class ConflictError(AppError):
    status_code = 409
    default_message = "Registro já existe"


class AuthError(AppError):
    """Bad credentials, or a missing, malformed or expired token."""

    status_code = 401
    default_message = "Não autorizado"


class NotFoundError(AppError):
    status_code = 404
    default_message = "Registro não encontrado"
