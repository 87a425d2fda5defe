"""Response resolution: turn status code and body into a typed result or error."""

import json
import logging
from collections.abc import Callable
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from supadata_client.core.exceptions import APIError, DecodeError, HTTPStatusError, SupadataError
from supadata_client.core.models import AsyncTranscript, ErrorDetail, SyncTranscript, Transcript

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=BaseModel)

Decoder = Callable[[bytes], T]

JOB_ID_KEY = "jobId"


def error_from_response(status_code: int, body: bytes) -> SupadataError:
    """Build the error for a failed response.

    A body that is not a JSON error object yields an HTTPStatusError that
    carries only the status code.
    """
    try:
        detail = ErrorDetail.model_validate_json(body)
    except ValidationError:
        return HTTPStatusError(status_code)
    return APIError(
        detail.identifier,
        detail.message,
        details=detail.details,
        documentation_url=detail.documentation_url,
        status_code=status_code,
    )


def resolve(status_code: int, body: bytes, decoder: Decoder[T]) -> T:
    """Return the decoded body, or raise the error the response describes.

    Any status code of 400 or above is a failure regardless of the body.

    Raises:
        APIError: Failure status with a readable error body
        HTTPStatusError: Failure status with an unreadable body
        DecodeError: Success status but the body does not match the result shape
    """
    if status_code >= 400:
        raise error_from_response(status_code, body)
    return decoder(body)


def _validate(model: type[M], data: Any) -> M:
    try:
        return model.model_validate(data)
    except ValidationError as e:
        raise DecodeError(f"Response does not match {model.__name__}: {e}") from e


def decode_model(model: type[M]) -> Decoder[M]:
    """Return a decoder that parses the body straight into ``model``."""

    def decode(body: bytes) -> M:
        try:
            return model.model_validate_json(body)
        except ValidationError as e:
            raise DecodeError(f"Response does not match {model.__name__}: {e}") from e

    return decode


def decode_transcript(body: bytes) -> Transcript:
    """Decode a transcript response into its sync or async variant.

    The two variants share no fields, so the body is first parsed loosely and
    checked for a job identifier. If one is present the body is an async job
    handle, whatever else it contains; otherwise it is a finished transcript.
    """
    try:
        raw = json.loads(body)
    except ValueError as e:
        raise DecodeError(f"Response is not valid JSON: {e}") from e

    if not isinstance(raw, dict):
        raise DecodeError(f"Expected a JSON object, got {type(raw).__name__}")

    if JOB_ID_KEY in raw:
        logger.debug("Transcript response is an async job handle")
        return Transcript(_validate(AsyncTranscript, raw))

    logger.debug("Transcript response is a finished transcript")
    return Transcript(_validate(SyncTranscript, raw))


def decode_job(model: type[M]) -> Decoder[M]:
    """Return a decoder for job status responses.

    The ``status`` field says which sibling fields are populated; every field
    tolerates absence, so the body is decoded in one pass.
    """
    decode = decode_model(model)

    def decode_status(body: bytes) -> M:
        job = decode(body)
        logger.debug("Job status is %s", getattr(job, "status", None))
        return job

    return decode_status
