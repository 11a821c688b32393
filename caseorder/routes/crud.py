from dataclasses import dataclass
from typing import Annotated, List, Tuple, Type
from fastapi import APIRouter, Depends, Path
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from sqlalchemy.orm import Session

from ..database import Base, get_db
from ..errors import NOT_FOUND, NOTHING_TO_DELETE, ValidationError
from ..schemas import MAX_INT, MessageOut, missing_fields
from ..store import Repository

ItemId = Annotated[int, Path(ge=1, le=MAX_INT)]


@dataclass(frozen=True)
class Resource:
    """Everything that differs between the CRUD resources, as data."""
    path: str
    tag: str
    model: Type[Base]
    schema_in: Type[BaseModel]
    schema_out: Type[BaseModel]
    required: Tuple[str, ...]
    bad_request: str
    not_found: str
    deleted: str
    bulk_delete: bool = False
    all_deleted: str = ""
    nothing_to_delete: str = ""


def message(status_code: int, text: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"message": text})


def build_router(resource: Resource) -> APIRouter:
    router = APIRouter(prefix=resource.path, tags=[resource.tag])
    schema_in = resource.schema_in
    schema_out = resource.schema_out
    not_found_doc = {404: {"model": MessageOut, "description": resource.not_found}}

    def get_repo(session: Session = Depends(get_db)) -> Repository:
        return Repository(session, resource.model)

    def require(body: BaseModel) -> None:
        missing = missing_fields(body, resource.required)
        if missing:
            raise ValidationError(resource.bad_request, missing)

    @router.get("", response_model=List[schema_out], name=f"{resource.tag}_list")
    def list_items(repo: Repository = Depends(get_repo)):
        return repo.list_all()

    @router.post("", response_model=schema_out, status_code=201, name=f"{resource.tag}_create",
                 responses={400: {"model": MessageOut, "description": resource.bad_request}})
    def create_item(body: schema_in, repo: Repository = Depends(get_repo)):
        require(body)
        return repo.create(body.model_dump())

    @router.put("/{item_id}", response_model=schema_out, name=f"{resource.tag}_update",
                responses=not_found_doc)
    def update_item(item_id: ItemId, body: schema_in, repo: Repository = Depends(get_repo)):
        require(body)
        result = repo.update(item_id, body.model_dump())
        if result is NOT_FOUND:
            return message(404, resource.not_found)
        return result

    # /all goes first so it is never read as an id
    if resource.bulk_delete:
        @router.delete("/all", response_model=MessageOut, name=f"{resource.tag}_delete_all",
                       responses={404: {"model": MessageOut, "description": resource.nothing_to_delete}})
        def delete_all_items(repo: Repository = Depends(get_repo)):
            result = repo.delete_all()
            if result is NOTHING_TO_DELETE:
                return message(404, resource.nothing_to_delete)
            return {"message": resource.all_deleted}

    @router.delete("/{item_id}", response_model=MessageOut, name=f"{resource.tag}_delete",
                   responses=not_found_doc)
    def delete_item(item_id: ItemId, repo: Repository = Depends(get_repo)):
        result = repo.delete_one(item_id)
        if result is NOT_FOUND:
            return message(404, resource.not_found)
        return {"message": resource.deleted}

    return router
