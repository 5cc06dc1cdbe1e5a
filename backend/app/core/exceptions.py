"""
Erros do registro de extensões

Todos herdam de HTTPException para que o FastAPI responda com
{"detail": ...} e o status correspondente sem handlers extras.
"""
from fastapi import HTTPException


class ExtensionError(HTTPException):
    status_code = 400
    default_detail = "Requisição inválida"

    def __init__(self, detail: str = None):
        super().__init__(status_code=self.status_code, detail=detail or self.default_detail)


class ValidationError(ExtensionError):
    status_code = 400
    default_detail = "Dados inválidos"


class CapacityError(ValidationError):
    default_detail = "Limite de extensões customizadas atingido"


class ConflictError(ExtensionError):
    status_code = 409
    default_detail = "Extensão já existe"


class NotFoundError(ExtensionError):
    status_code = 404
    default_detail = "Extensão não encontrada"


class PersistenceError(ExtensionError):
    status_code = 500
    default_detail = "Erro interno no banco de dados"
