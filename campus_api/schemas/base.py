"""공통 스키마 베이스 — camelCase 직렬화 및 부분 업데이트 스키마 생성.

Shared schema bases.
Wire payloads use camelCase keys (``instituteId``) while Python code and the
database use snake_case. Request bodies reject undeclared keys.
"""

from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, create_model
from pydantic.alias_generators import to_camel


class RequestSchema(BaseModel):
    """요청 본문 베이스 스키마.

    Base for request bodies: camelCase keys only, extra keys forbidden.
    """

    model_config = ConfigDict(alias_generator=to_camel, extra="forbid")


class ResponseSchema(BaseModel):
    """응답 베이스 스키마 — ORM 객체에서 직접 생성.

    Base for responses, built straight from ORM objects and serialised
    with camelCase aliases.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


def make_partial(schema: type[RequestSchema], name: str) -> type[RequestSchema]:
    """생성 스키마로부터 모든 필드가 선택인 수정 스키마를 만듭니다.

    Derive a schema with the same declared fields as ``schema`` but none
    required. Omitted fields default to ``None`` and are dropped by
    ``model_dump(exclude_unset=True)``; an explicit ``null`` still fails the
    field's type check.

    Args:
        schema: 필수 필드 스키마 (Required-field schema)
        name: 생성될 스키마 이름 (Name of the generated schema)

    Returns:
        type[RequestSchema]: 부분 업데이트 스키마 (Partial update schema)
    """
    fields: dict[str, Any] = {}
    for field_name, field in schema.model_fields.items():
        # Strict() 등 제약은 FieldInfo.metadata로 분리되므로 다시 붙임
        # Constraints such as Strict() live in FieldInfo.metadata; re-attach them
        annotation: Any = field.annotation
        if field.metadata:
            annotation = Annotated[(annotation, *field.metadata)]
        fields[field_name] = (annotation, None)
    return create_model(name, __base__=RequestSchema, __module__=schema.__module__, **fields)
