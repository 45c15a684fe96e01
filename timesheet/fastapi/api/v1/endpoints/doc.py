"""
Documentation endpoints.

Swagger UI at /docs reads the OpenAPI document from /openapi.yaml; the
JSON form is served by FastAPI itself at /openapi.json.
"""

import yaml
from fastapi import APIRouter, Request, Response
from fastapi.openapi.docs import get_swagger_ui_html

router = APIRouter()


@router.get("/docs", include_in_schema=False)
async def swagger_ui(request: Request):
    return get_swagger_ui_html(
        openapi_url="/openapi.yaml",
        title=f"{request.app.title} Documentation"
    )


@router.get("/openapi.yaml", include_in_schema=False)
async def openapi_yaml(request: Request):
    content = yaml.safe_dump(request.app.openapi(), sort_keys=False, allow_unicode=True)
    return Response(content=content, media_type="application/yaml")
