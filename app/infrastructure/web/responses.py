"""
Translation of use case results into HTTP responses.
"""

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.application.dto.base_dto import ApiResponseDTO
from app.application.use_cases.base_use_case import UseCaseResult


def to_api_response(result: UseCaseResult, success_status_code: int = status.HTTP_200_OK) -> JSONResponse:
    """
    Wrap a use case result in the response envelope.
    The HTTP status equals the envelope status code, except that a successful
    result may use success_status_code (e.g. 201 for creates).
    """
    envelope = ApiResponseDTO(
        data=jsonable_encoder(result.data, by_alias=True),
        status_code=int(result.status_code),
        message=result.message,
        is_success=result.is_success
    )

    http_status = success_status_code if result.is_success else int(result.status_code)
    return JSONResponse(
        status_code=http_status,
        content=envelope.model_dump(mode="json", by_alias=True)
    )
