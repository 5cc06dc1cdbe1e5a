"""
Registro de extensões bloqueadas (fixas e customizadas)
"""
import logging
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session
from typing import List, Optional, Union

from app.core.exceptions import (
    CapacityError,
    ConflictError,
    NotFoundError,
    PersistenceError,
    ValidationError,
)
from app.core.logging import log_database_error
from app.models import ExtensionType, FileExtension
from app.utils.extension_names import (
    MAX_CUSTOM_EXTENSIONS,
    MAX_EXTENSION_ID,
    normalize_extension,
    parse_extension_id,
    validate_block_flag,
    validate_extension_name,
)

logger = logging.getLogger(__name__)


class ExtensionRegistry:
    """
    Operações sobre a tabela file_extensions

    Cada instância usa a sessão da requisição atual. Falhas do banco
    viram PersistenceError com mensagem opaca; o detalhe vai para o log.
    """

    def __init__(self, db: Session):
        self.db = db

    def _fail(self, operation: str, error: SQLAlchemyError, params: dict = None) -> PersistenceError:
        self.db.rollback()
        log_database_error(logger, operation, error, params)
        return PersistenceError()

    def list_fixed(self) -> List[FileExtension]:
        try:
            return (
                self.db.query(FileExtension)
                .filter(FileExtension.ext_type == ExtensionType.FIXED.value)
                .order_by(FileExtension.id)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("list_fixed", e)

    def update_fixed(self, ext_name: Optional[str], is_blocked: Optional[str]) -> None:
        """Altera o flag de bloqueio de uma extensão fixa"""
        name = normalize_extension(ext_name)
        if not name:
            raise ValidationError("Nome da extensão inválido")
        flag = validate_block_flag(is_blocked)

        try:
            updated = (
                self.db.query(FileExtension)
                .filter(
                    FileExtension.ext_type == ExtensionType.FIXED.value,
                    func.lower(FileExtension.ext_name) == name,
                )
                .update({FileExtension.is_blocked: flag}, synchronize_session=False)
            )
            if updated == 0:
                self.db.rollback()
                raise NotFoundError(f"Extensão fixa '{name}' não encontrada")
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("update_fixed", e, {"name": name, "is_blocked": flag})

        logger.info(f"Fixed extension {name} set is_blocked={flag}")

    def count_custom(self) -> int:
        try:
            return (
                self.db.query(func.count(FileExtension.id))
                .filter(FileExtension.ext_type == ExtensionType.CUSTOM.value)
                .scalar()
            )
        except SQLAlchemyError as e:
            raise self._fail("count_custom", e)

    def find_by_name(self, name: str) -> Optional[FileExtension]:
        """Busca pelo nome já normalizado (fixa ou customizada)"""
        try:
            return (
                self.db.query(FileExtension)
                .filter(func.lower(FileExtension.ext_name) == name)
                .first()
            )
        except SQLAlchemyError as e:
            raise self._fail("find_by_name", e, {"name": name})

    def list_custom(self) -> List[FileExtension]:
        """Extensões customizadas em ordem de criação, no máximo 200"""
        try:
            return (
                self.db.query(FileExtension)
                .filter(FileExtension.ext_type == ExtensionType.CUSTOM.value)
                .order_by(FileExtension.created_at, FileExtension.id)
                .limit(MAX_CUSTOM_EXTENSIONS)
                .all()
            )
        except SQLAlchemyError as e:
            raise self._fail("list_custom", e)

    def add_custom(self, ext_name: Optional[str]) -> FileExtension:
        """
        Adiciona uma extensão customizada (sempre bloqueada)

        Limite e duplicidade são verificados antes do insert; uma violação
        de unique no insert (corrida entre requisições) também vira 409.
        """
        name = validate_extension_name(ext_name)

        if self.count_custom() >= MAX_CUSTOM_EXTENSIONS:
            raise CapacityError(
                f"Máximo de {MAX_CUSTOM_EXTENSIONS} extensões customizadas atingido"
            )

        if self.find_by_name(name) is not None:
            raise ConflictError(f"Extensão '{name}' já existe")

        extension = FileExtension(
            ext_type=ExtensionType.CUSTOM.value,
            ext_name=name,
            is_blocked="Y",
        )

        try:
            self.db.add(extension)
            self.db.commit()
            self.db.refresh(extension)
        except IntegrityError:
            self.db.rollback()
            logger.warning(f"Unique constraint hit while adding custom extension {name}")
            raise ConflictError(f"Extensão '{name}' já existe")
        except SQLAlchemyError as e:
            raise self._fail("add_custom", e, {"name": name})

        logger.info(f"Created custom extension: {name} (id={extension.id})")
        return extension

    def delete_custom(self, ext_id: Union[int, str, None]) -> None:
        ext_id = parse_extension_id(ext_id)
        if ext_id > MAX_EXTENSION_ID:
            # Fora da faixa da coluna, não pode existir
            raise NotFoundError(f"Extensão customizada {ext_id} não encontrada")

        try:
            deleted = (
                self.db.query(FileExtension)
                .filter(
                    FileExtension.id == ext_id,
                    FileExtension.ext_type == ExtensionType.CUSTOM.value,
                )
                .delete(synchronize_session=False)
            )
            if deleted == 0:
                self.db.rollback()
                raise NotFoundError(f"Extensão customizada {ext_id} não encontrada")
            self.db.commit()
        except SQLAlchemyError as e:
            raise self._fail("delete_custom", e, {"id": ext_id})

        logger.info(f"Deleted custom extension id={ext_id}")
