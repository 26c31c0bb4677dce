"""JSON:API response class for FastAPI/Starlette."""

from fastapi.responses import JSONResponse

JSONAPI_MEDIA_TYPE = "application/vnd.api+json"


class JsonApiResponse(JSONResponse):
    """JSONResponse sent with the JSON:API media type."""

    media_type = JSONAPI_MEDIA_TYPE
