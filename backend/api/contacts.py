from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError as PydanticValidationError
import logging

from constants import ErrorMessages, HTTPStatus
from dependencies import get_contact_service
from domain.result import Failure, Success
from domain.value_objects.contact_id import ContactId
from dtos.request.contact_request import ContactRequest
from dtos.response.contact_response import ContactResponse, ErrorResponse
from exceptions import ContactAlreadyExistsError, ValidationError
from services.interfaces import IContactService
from utils.error_handlers import error_body, handle_api_errors

logger = logging.getLogger(__name__)

router = APIRouter()


async def _read_contact_request(request: Request) -> ContactRequest | None:
    """Decode the JSON body, or None if it is missing or unusable."""
    raw = await request.body()
    try:
        return ContactRequest.model_validate_json(raw)
    except PydanticValidationError:
        return None


def _failure_response(failure: Failure) -> JSONResponse:
    """Map a failed Result to its HTTP response."""
    logger.warning(f"Contact creation failed: {failure.error}")

    if isinstance(failure.cause, ValidationError):
        return JSONResponse(status_code=HTTPStatus.BAD_REQUEST, content=error_body(failure.error))

    if isinstance(failure.cause, ContactAlreadyExistsError):
        return JSONResponse(status_code=HTTPStatus.CONFLICT, content=error_body(failure.error))

    if failure.cause is not None:
        logger.error(f"Underlying error: {failure.cause!r}", exc_info=failure.cause)
    return JSONResponse(
        status_code=HTTPStatus.INTERNAL_SERVER_ERROR,
        content=error_body(ErrorMessages.INTERNAL_ERROR)
    )


@router.post(
    "/contacts",
    status_code=HTTPStatus.CREATED,
    response_model=ContactResponse,
    responses={
        HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
        HTTPStatus.CONFLICT: {"model": ErrorResponse},
        HTTPStatus.INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
@handle_api_errors("Contact creation")
async def create_contact(
    request: Request,
    service: IContactService = Depends(get_contact_service)
):
    """Register a contact from a {"name", "email"} JSON body."""
    logger.info("Processing contact creation request")

    contact_request = await _read_contact_request(request)
    if contact_request is None:
        logger.warning("Request body is missing or invalid")
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content=error_body(ErrorMessages.REQUEST_BODY_REQUIRED)
        )

    result = await service.register_contact(contact_request)

    if isinstance(result, Success):
        response = result.value
        return JSONResponse(
            status_code=HTTPStatus.CREATED,
            content=response.to_body(),
            headers={"Location": f"/contacts/{response.id}"}
        )
    return _failure_response(result)


@router.get(
    "/contacts/{contact_id}",
    response_model=ContactResponse,
    responses={
        HTTPStatus.BAD_REQUEST: {"model": ErrorResponse},
        HTTPStatus.NOT_FOUND: {"model": ErrorResponse},
        HTTPStatus.INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
@handle_api_errors("Contact lookup")
async def get_contact(
    contact_id: str,
    service: IContactService = Depends(get_contact_service)
):
    """Fetch a registered contact by id."""
    try:
        parsed_id = ContactId.parse(contact_id)
    except ValidationError:
        return JSONResponse(
            status_code=HTTPStatus.BAD_REQUEST,
            content=error_body(ErrorMessages.INVALID_CONTACT_ID)
        )

    result = await service.get_contact(parsed_id)

    if isinstance(result, Failure):
        return _failure_response(result)
    if result.value is None:
        return JSONResponse(
            status_code=HTTPStatus.NOT_FOUND,
            content=error_body(ErrorMessages.CONTACT_NOT_FOUND)
        )
    return JSONResponse(status_code=HTTPStatus.OK, content=result.value.to_body())
