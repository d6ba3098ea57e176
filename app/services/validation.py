from typing import Any, Dict, List, Type, TypeVar

from pydantic import BaseModel, ValidationError

from app.core.exceptions import validation_failed

SchemaType = TypeVar("SchemaType", bound=BaseModel)


def format_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flattens pydantic errors into [{"attribute", "details"}], attribute in payload (camelCase) form."""
    errors = []
    for error in exc.errors():
        attribute = ".".join(str(part) for part in error["loc"])
        errors.append({"attribute": attribute, "details": error["msg"]})
    return errors


def validate_payload(schema: Type[SchemaType], data: Dict[str, Any]) -> SchemaType:
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise validation_failed(format_errors(exc))
