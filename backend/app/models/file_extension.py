from sqlalchemy import Column, Integer, String, DateTime, CheckConstraint
from sqlalchemy.sql import func
import enum
from app.core.database import Base


class ExtensionType(str, enum.Enum):
    FIXED = "FIXED"
    CUSTOM = "CUSTOM"


class FileExtension(Base):
    """
    Regra de bloqueio de extensão de arquivo

    FIXED: criada pelo seed, só o flag de bloqueio muda.
    CUSTOM: adicionada pelo usuário, sempre bloqueada.
    """
    __tablename__ = "file_extensions"
    __table_args__ = (
        CheckConstraint("ext_type IN ('FIXED', 'CUSTOM')", name="ck_file_extensions_ext_type"),
        CheckConstraint("is_blocked IN ('Y', 'N')", name="ck_file_extensions_is_blocked"),
    )

    id = Column(Integer, primary_key=True, index=True)
    ext_type = Column(String(10), nullable=False, index=True)
    # Sempre normalizado (minúsculo, sem ponto), então o unique vale sem distinção de caixa
    ext_name = Column(String(20), unique=True, nullable=False)
    is_blocked = Column(String(1), nullable=False, default="N", server_default="N")
    created_at = Column(DateTime(timezone=True), server_default=func.now())
