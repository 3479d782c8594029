from typing import Any, Callable, Dict, Type, TypeVar

from fastapi import HTTPException, Request, status
from pydantic import BaseModel, ValidationError

from app.core.exceptions import DuplicateRecordError

SchemaT = TypeVar("SchemaT", bound=BaseModel)

def validated_body(schema: Type[SchemaT], message: str) -> Callable:
    """
    Dependency factory that parses the JSON body against ``schema``.

    Any decoding or validation problem becomes a 400 with the given generic
    message; field-level details are not returned to the client.
    """
    async def body_parser(request: Request) -> SchemaT:
        try:
            payload = await request.json()
            return schema.model_validate(payload)
        except (ValueError, ValidationError):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return body_parser

def conflict(exc: DuplicateRecordError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc))

def _inline_refs(node: Any, defs: Dict[str, Any]) -> Any:
    if isinstance(node, dict):
        ref = node.get("$ref")
        if isinstance(ref, str) and ref.startswith("#/$defs/"):
            siblings = {key: value for key, value in node.items() if key != "$ref"}
            return {**_inline_refs(defs[ref.split("/")[-1]], defs), **_inline_refs(siblings, defs)}
        return {key: _inline_refs(value, defs) for key, value in node.items()}
    if isinstance(node, list):
        return [_inline_refs(item, defs) for item in node]
    return node

def body_docs(schema: Type[BaseModel]) -> Dict[str, Any]:
    """
    ``openapi_extra`` documenting the JSON body read by ``validated_body``.
    Nested definitions are inlined so the schema stands on its own.
    """
    json_schema = schema.model_json_schema()
    defs = json_schema.pop("$defs", {})
    return {
        "requestBody": {
            "required": True,
            "content": {"application/json": {"schema": _inline_refs(json_schema, defs)}},
        }
    }
