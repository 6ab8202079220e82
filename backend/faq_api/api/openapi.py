"""OpenAPI helpers shared by the routers."""
from pydantic import BaseModel


def json_body(schema: type[BaseModel]) -> dict:
    """OpenAPI ``requestBody`` for routes that parse their body by hand."""
    return {
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {
                    "schema": schema.model_json_schema(ref_template="#/components/schemas/{model}"),
                },
            },
        },
    }
