from fastapi import APIRouter, FastAPI, Request
import uvicorn
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException
from starlette.responses import JSONResponse, Response
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from progress_api.config import create_db, get_settings
from progress_api.routes.course_routes import course_routes
from progress_api.routes.user_routes import user_routes
from progress_api.utils.logger import clear_request_id, configure_logging, set_request_id
from progress_api.utils.validation import InvalidDataError, format_validation_errors, invalid_data_body

settings = get_settings()
app = FastAPI(title=settings.APP_NAME)
logger = configure_logging()
create_db()
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def request_logger(request: Request, call_next):
    rid = set_request_id(request.headers.get("x-request-id"))
    try:
        logger.info("request start method=%s path=%s client=%s", request.method, request.url.path, request.client)
        response: Response = await call_next(request)
        logger.info("request end status=%s method=%s path=%s", response.status_code, request.method, request.url.path)
        response.headers["x-request-id"] = rid
        return response
    except Exception:
        logger.exception("request error method=%s path=%s", request.method, request.url.path)
        raise
    finally:
        clear_request_id()


@app.exception_handler(HTTPException)
async def http_exception_handler(request: Request, exc: HTTPException) -> JSONResponse:
    # Server-side errors with stack traces; client errors as warnings.
    if exc.status_code >= 500:
        logger.exception("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
    else:
        logger.warning("http error status=%s method=%s path=%s detail=%s", exc.status_code, request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    errors = format_validation_errors(exc.errors())
    logger.warning("validation error method=%s path=%s errors=%s", request.method, request.url.path, errors)
    return JSONResponse(status_code=422, content=invalid_data_body(errors))


@app.exception_handler(InvalidDataError)
async def invalid_data_handler(request: Request, exc: InvalidDataError) -> JSONResponse:
    logger.warning("invalid data method=%s path=%s errors=%s", request.method, request.url.path, exc.errors)
    return JSONResponse(status_code=422, content=invalid_data_body(exc.errors))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    # Never leak internal exception details to clients.
    logger.exception("unhandled error method=%s path=%s", request.method, request.url.path)
    return JSONResponse(
        status_code=HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


@app.get("/")
def read_root():
    return {"message": f"{settings.APP_NAME} is Healthy"}


v1 = APIRouter(prefix="/api/v1")
v1.include_router(user_routes)
v1.include_router(course_routes)
app.include_router(v1)


def main():
    uvicorn.run(app, host="0.0.0.0", port=8000)


if __name__ == "__main__":
    main()
