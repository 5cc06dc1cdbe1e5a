from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session
from typing import List, Optional

from app.core.database import get_db
from app.services.extension_registry import ExtensionRegistry
from app.utils.extension_names import MAX_CUSTOM_EXTENSIONS, MAX_EXTENSION_NAME_LENGTH

router = APIRouter(prefix="/api/extensions", tags=["extensions"])


# Schemas
class FixedExtensionUpdate(BaseModel):
    ext_name: Optional[str] = Field(None, alias="extName")
    is_blocked: Optional[str] = Field(None, alias="isBlocked")


class CustomExtensionCreate(BaseModel):
    ext_name: Optional[str] = Field(None, alias="extName")


class FixedExtensionResponse(BaseModel):
    ext_id: int = Field(alias="extId")
    ext_name: str = Field(alias="extName")
    is_blocked: str = Field(alias="isBlocked")

    class Config:
        populate_by_name = True


class CustomExtensionResponse(BaseModel):
    ext_id: int = Field(alias="extId")
    ext_name: str = Field(alias="extName")

    class Config:
        populate_by_name = True


class SuccessResponse(BaseModel):
    success: bool = True


class SummaryResponse(BaseModel):
    custom_count: int = Field(alias="customCount")
    custom_limit: int = Field(alias="customLimit")
    max_name_length: int = Field(alias="maxNameLength")

    class Config:
        populate_by_name = True


def get_registry(db: Session = Depends(get_db)) -> ExtensionRegistry:
    return ExtensionRegistry(db)


# Endpoints
@router.get("/fixed", response_model=List[FixedExtensionResponse])
def list_fixed_extensions(registry: ExtensionRegistry = Depends(get_registry)):
    """Lista as extensões fixas com o estado de bloqueio"""
    return [
        FixedExtensionResponse(ext_id=e.id, ext_name=e.ext_name, is_blocked=e.is_blocked)
        for e in registry.list_fixed()
    ]


@router.put("/fixed", response_model=SuccessResponse)
def update_fixed_extension(
    data: FixedExtensionUpdate,
    registry: ExtensionRegistry = Depends(get_registry)
):
    """Marca ou desmarca o bloqueio de uma extensão fixa"""
    registry.update_fixed(data.ext_name, data.is_blocked)
    return SuccessResponse()


@router.get("/custom", response_model=List[CustomExtensionResponse])
def list_custom_extensions(registry: ExtensionRegistry = Depends(get_registry)):
    """Lista as extensões customizadas (máximo 200, em ordem de criação)"""
    return [
        CustomExtensionResponse(ext_id=e.id, ext_name=e.ext_name)
        for e in registry.list_custom()
    ]


@router.post("/custom", response_model=SuccessResponse)
def create_custom_extension(
    data: CustomExtensionCreate,
    registry: ExtensionRegistry = Depends(get_registry)
):
    """Adiciona uma extensão customizada"""
    registry.add_custom(data.ext_name)
    return SuccessResponse()


@router.delete("/custom/{ext_id}", response_model=SuccessResponse)
def delete_custom_extension(
    ext_id: str,
    registry: ExtensionRegistry = Depends(get_registry)
):
    """Remove uma extensão customizada pelo id"""
    registry.delete_custom(ext_id)
    return SuccessResponse()


@router.get("/summary", response_model=SummaryResponse)
def extensions_summary(registry: ExtensionRegistry = Depends(get_registry)):
    """Contagem atual e limites usados pela interface"""
    return SummaryResponse(
        custom_count=registry.count_custom(),
        custom_limit=MAX_CUSTOM_EXTENSIONS,
        max_name_length=MAX_EXTENSION_NAME_LENGTH,
    )


@router.get("/health")
def health_check():
    return {"status": "ok"}
