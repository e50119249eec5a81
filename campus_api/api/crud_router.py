"""제네릭 CRUD 라우터 팩토리 — 리소스마다 동일한 6개 엔드포인트를 생성.

Generic CRUD router factory.
Mounts the six uniform operations for one entity type:

    GET    /             list (skip/take pagination)   200
    GET    /{record_id}  get by id                     200 / 404
    POST   /             create                        201
    PATCH  /{record_id}  modify (partial body)         200 / 404
    PUT    /{record_id}  replace (full body)           200 / 404
    DELETE /{record_id}  delete                        204 / 404

Invalid bodies, ids and query parameters are rejected with 400 before any
database access; foreign-key failures are returned as 409.
"""

from typing import Annotated, Any
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.database import get_db
from campus_api.schemas.base import RequestSchema, ResponseSchema
from campus_api.services.crud_service import CrudService
from campus_api.utils.pagination import PageParams


def build_crud_router(
    service: CrudService[Any, Any],
    create_schema: type[RequestSchema],
    update_schema: type[RequestSchema],
    response_schema: type[ResponseSchema],
    singular: str,
    plural: str,
) -> APIRouter:
    """엔티티 하나에 대한 CRUD 라우터를 생성합니다.

    Build the CRUD router for one entity type.

    Args:
        service: 엔티티 CRUD 서비스 (CRUD service bound to the entity)
        create_schema: 필수 필드 스키마, POST/PUT 본문 (Required-field body schema)
        update_schema: 선택 필드 스키마, PATCH 본문 (Partial body schema)
        response_schema: 응답 스키마 (Response schema)
        singular: operation_id용 단수형, 예: "Department" (Singular name for operation ids)
        plural: operation_id용 복수형, 예: "Departments" (Plural name for operation ids)

    Returns:
        APIRouter: 6개 엔드포인트가 등록된 라우터 (Router with the six endpoints)
    """
    router: APIRouter = APIRouter()
    label: str = service.entity_name.lower()
    invalid_body: dict[int | str, dict[str, Any]] = {400: {"description": f"Invalid {label}."}}
    not_found: dict[int | str, dict[str, Any]] = {404: {"description": f"{service.entity_name} not found."}}

    @router.get(
        "/",
        response_model=list[response_schema],
        operation_id=f"find{plural}",
        summary=f"Find {label} records.",
        description=(
            'The query parameters "skip" and "take" can be used for pagination. The first '
            "is the offset and the second is the number of elements to be returned."
        ),
        responses={400: {"description": "Invalid query parameters."}},
    )
    async def find_records(
        page: Annotated[PageParams, Depends()],
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> list[ResponseSchema]:
        return await service.list_records(db, skip=page.skip, take=page.take)

    @router.get(
        "/{record_id}",
        response_model=response_schema,
        operation_id=f"find{singular}ById",
        summary=f"Find a {label} by ID.",
        responses=not_found,
    )
    async def find_record_by_id(
        record_id: UUID,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> ResponseSchema:
        return await service.get_record(db, record_id)

    @router.post(
        "/",
        response_model=response_schema,
        status_code=201,
        operation_id=f"create{singular}",
        summary=f"Create a new {label}.",
        responses=invalid_body,
    )
    async def create_record(
        data: create_schema,  # type: ignore[valid-type]
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> ResponseSchema:
        result: ResponseSchema = await service.create_record(db, data)
        await db.commit()
        return result

    @router.patch(
        "/{record_id}",
        response_model=response_schema,
        operation_id=f"modify{singular}",
        summary=f"Update/modify an existing {label}.",
        responses={**invalid_body, **not_found},
    )
    async def modify_record(
        record_id: UUID,
        data: update_schema,  # type: ignore[valid-type]
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> ResponseSchema:
        result: ResponseSchema = await service.modify_record(db, record_id, data)
        await db.commit()
        return result

    @router.put(
        "/{record_id}",
        response_model=response_schema,
        operation_id=f"replace{singular}",
        summary=f"Update/replace an existing {label}.",
        responses={**invalid_body, **not_found},
    )
    async def replace_record(
        record_id: UUID,
        data: create_schema,  # type: ignore[valid-type]
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> ResponseSchema:
        result: ResponseSchema = await service.replace_record(db, record_id, data)
        await db.commit()
        return result

    @router.delete(
        "/{record_id}",
        status_code=204,
        operation_id=f"delete{singular}",
        summary=f"Delete a {label}.",
        responses=not_found,
    )
    async def delete_record(
        record_id: UUID,
        db: Annotated[AsyncSession, Depends(get_db)],
    ) -> None:
        await service.delete_record(db, record_id)
        await db.commit()

    return router
