"""
Seed das extensões fixas

Cria a tabela se não existir e insere as extensões fixas com
is_blocked = 'N'. Pode ser executado várias vezes sem duplicar linhas.

Uso: python -m app.seed
"""
import logging
from sqlalchemy import func
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session
from typing import Iterable, List

from app.core.config import Settings
from app.core.database import Base, create_db_engine, create_session_factory
from app.core.logging import setup_logging
from app.models import ExtensionType, FileExtension
from app.utils.extension_names import FIXED_EXTENSIONS, normalize_extension

logger = logging.getLogger(__name__)


def create_tables(engine: Engine) -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Table checked/created", extra={'table': FileExtension.__tablename__})


def seed_fixed_extensions(db: Session, names: Iterable[str] = FIXED_EXTENSIONS) -> List[str]:
    """
    Insere as extensões fixas que ainda não existem

    Returns:
        Nomes efetivamente inseridos
    """
    inserted = []

    for raw in names:
        name = normalize_extension(raw)
        exists = (
            db.query(FileExtension.id)
            .filter(
                FileExtension.ext_type == ExtensionType.FIXED.value,
                func.lower(FileExtension.ext_name) == name,
            )
            .first()
        )
        if exists:
            logger.info(f"Fixed extension already exists: {name}")
            continue

        db.add(FileExtension(ext_type=ExtensionType.FIXED.value, ext_name=name, is_blocked="N"))
        db.commit()
        inserted.append(name)
        logger.info(f"Inserted fixed extension: {name}")

    return inserted


def run_seed(settings: Settings) -> List[str]:
    engine = create_db_engine(settings)
    db = create_session_factory(engine)()
    try:
        create_tables(engine)
        inserted = seed_fixed_extensions(db)
        logger.info("Seeding completed", extra={'inserted': inserted})
        return inserted
    finally:
        db.close()
        engine.dispose()


def main():
    settings = Settings()
    setup_logging(level=settings.LOG_LEVEL, json_logs=settings.JSON_LOGS)
    run_seed(settings)


if __name__ == "__main__":
    main()
