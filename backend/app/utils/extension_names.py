"""
Normalização e validação de nomes de extensão
"""
from typing import Optional, Union

from app.core.exceptions import ValidationError

MAX_EXTENSION_NAME_LENGTH = 20
MAX_CUSTOM_EXTENSIONS = 200

# Maior valor da coluna id (INTEGER)
MAX_EXTENSION_ID = 2 ** 31 - 1

# Extensões fixas criadas pelo seed
FIXED_EXTENSIONS = ('bat', 'cmd', 'com', 'cpl', 'exe', 'scr', 'js')

BLOCK_FLAGS = ('Y', 'N')


def normalize_extension(name: Optional[str]) -> str:
    """
    Forma canônica de uma extensão

    Remove espaços nas pontas, converte para minúsculo e remove pontos
    iniciais até o valor estabilizar, então o resultado nunca começa com
    ponto nem tem espaço nas pontas. Ex: ".EXE" -> "exe", "  bat " -> "bat",
    ". .sh" -> "sh"
    """
    if not name:
        return ''

    name = name.strip().lower()
    while name.startswith('.'):
        name = name[1:].strip()
    return name


def validate_extension_name(raw: Optional[str]) -> str:
    """
    Valida o nome informado e retorna a forma normalizada
    """
    if not raw:
        raise ValidationError("Nome da extensão é obrigatório")

    name = normalize_extension(raw)

    if not name:
        raise ValidationError("Nome da extensão inválido")

    if len(name) > MAX_EXTENSION_NAME_LENGTH:
        raise ValidationError(
            f"Nome da extensão deve ter no máximo {MAX_EXTENSION_NAME_LENGTH} caracteres"
        )

    return name


def validate_block_flag(flag: Optional[str]) -> str:
    if flag not in BLOCK_FLAGS:
        raise ValidationError("isBlocked deve ser 'Y' ou 'N'")
    return flag


def parse_extension_id(raw: Union[int, str, None]) -> int:
    """
    Converte o id recebido na URL, aceitando apenas inteiros positivos
    """
    if isinstance(raw, bool):
        raise ValidationError("Id inválido")

    if isinstance(raw, int):
        ext_id = raw
    elif isinstance(raw, str) and raw.strip().isascii() and raw.strip().isdigit():
        ext_id = int(raw.strip())
    else:
        raise ValidationError("Id inválido")

    if ext_id <= 0:
        raise ValidationError("Id inválido")

    return ext_id
