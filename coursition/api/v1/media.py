"""Media and job endpoints."""

import json

from fastapi import APIRouter, Path, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from starlette.datastructures import UploadFile

from coursition.container import Container
from coursition.jobs.models import Job, JobResult, JobsResponse
from coursition.media.models import (
    FileMediaRequest,
    MediaResponse,
    ParseMediaRequest,
    UrlMediaRequest,
)

router = APIRouter(prefix="/media")


def _container(request: Request) -> Container:
    return request.app.state.container


async def _decode_parse_request(request: Request) -> ParseMediaRequest:
    """Decode either a JSON ``{url, language}`` body or a multipart upload."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("multipart/form-data"):
            form = await request.form()
            upload = form.get("file")
            if not isinstance(upload, UploadFile):
                raise RequestValidationError([{
                    "type": "missing",
                    "loc": ("body", "file"),
                    "msg": "Field required",
                    "input": None,
                }])
            return FileMediaRequest(
                content=await upload.read(),
                filename=upload.filename,
                language=form.get("language"),
            )
        return UrlMediaRequest.model_validate(await request.json())
    except json.JSONDecodeError as e:
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body", e.pos),
            "msg": "JSON decode error",
            "input": {},
        }])
    except UnicodeDecodeError as e:
        raise RequestValidationError([{
            "type": "json_invalid",
            "loc": ("body", e.start),
            "msg": "Body is not valid UTF-8",
            "input": {},
        }])
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))


@router.post("/parse", response_model=MediaResponse)
async def parse_media(request: Request):
    """Parse media given by URL (JSON body) or by upload (multipart)."""
    payload = await _decode_parse_request(request)
    return await _container(request).media.parse_media(payload)


@router.get("/jobs", response_model=JobsResponse, response_model_exclude_none=True)
async def get_jobs(request: Request):
    return await _container(request).jobs.get_jobs()


@router.get("/job/{id}", response_model=Job, response_model_exclude_none=True)
async def get_job(request: Request, id: int = Path(gt=0)):
    return await _container(request).jobs.get_job_by_id(id)


@router.get("/job/{id}/result", response_model=JobResult)
async def get_job_result(request: Request, id: int = Path(gt=0)):
    """Result of a completed job. 404 if the job is missing or not completed."""
    return await _container(request).jobs.get_job_result(id)
