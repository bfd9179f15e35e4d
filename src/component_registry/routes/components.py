"""HTTP route handlers for kit component queries."""

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict, Field

from component_registry.kits import KitNotFoundError
from component_registry.models.component import ComponentData, ComponentMeta
from component_registry.services.kit_service import ComponentNotFoundError, KitService

router = APIRouter(tags=["components"])


class ComponentMetaResponse(BaseModel):
    """Response body for component metadata."""

    name: str
    version: str
    tags: list[str]
    themes: list[str]

    @classmethod
    def from_meta(cls, meta: ComponentMeta) -> "ComponentMetaResponse":
        """Create response from ComponentMeta model."""
        return cls(
            name=meta.name,
            version=meta.version,
            tags=list(meta.tags),
            themes=list(meta.themes),
        )


class ComponentCodeResponse(BaseModel):
    """Response body for component source."""

    tsx: str
    css: str | None = None


class ComponentDataResponse(BaseModel):
    """Response body for a full component."""

    model_config = ConfigDict(populate_by_name=True)

    metadata: ComponentMetaResponse
    code: ComponentCodeResponse
    preview_url: str | None = Field(default=None, alias="previewUrl")

    @classmethod
    def from_component(cls, component: ComponentData) -> "ComponentDataResponse":
        """Create response from ComponentData model."""
        return cls(
            metadata=ComponentMetaResponse.from_meta(component.metadata),
            code=ComponentCodeResponse(tsx=component.code.tsx, css=component.code.css),
            preview_url=component.preview_url,
        )


class KitListResponse(BaseModel):
    """Response body for the kit listing."""

    kits: list[str]


def get_kit_service(request: Request) -> KitService:
    """Get KitService from request state."""
    return request.app.state.kit_service


def _not_found(message: str) -> JSONResponse:
    return JSONResponse(status_code=404, content={"error": message})


@router.get("/kits", response_model=KitListResponse)
async def list_kits(request: Request) -> KitListResponse:
    """List known kits."""
    service = get_kit_service(request)
    return KitListResponse(kits=service.list_kits())


@router.get(
    "/{kit}/components",
    response_model=list[ComponentMetaResponse],
    responses={404: {"description": "Kit not found"}},
)
async def list_components(request: Request, kit: str) -> list[ComponentMetaResponse] | JSONResponse:
    """List the components of a kit."""
    service = get_kit_service(request)
    try:
        components = await service.list_components(kit)
    except KitNotFoundError:
        return _not_found("Kit not found")
    return [ComponentMetaResponse.from_meta(meta) for meta in components]


@router.get(
    "/{kit}/components/{name}",
    response_model=ComponentDataResponse,
    response_model_exclude_none=True,
    responses={404: {"description": "Kit or component not found"}},
)
async def get_component(
    request: Request, kit: str, name: str
) -> ComponentDataResponse | JSONResponse:
    """Get a component by name."""
    service = get_kit_service(request)
    try:
        component = await service.get_component(kit, name)
    except KitNotFoundError:
        return _not_found("Kit not found")
    except ComponentNotFoundError:
        return _not_found("Component not found")
    return ComponentDataResponse.from_component(component)
