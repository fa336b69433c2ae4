"""
Movie Chat Bridge - FastAPI application for chatting with a remote movie search service.
Keeps per-session conversations, forwards queries and formats the results as chat replies.
"""
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from config import Config
from routes import chat
from utils.http_client import HTTPClientManager
from utils.logger import app_logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager for startup and shutdown events."""
    app_logger.info(f"Forwarding searches to {Config.SEARCH_SERVICE_URL}")
    yield
    await HTTPClientManager.close_all()

app = FastAPI(title=Config.APP_TITLE, lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report the first invalid ChatRequest field (session_id or text) as one readable message."""
    error = exc.errors()[0]
    field = error["loc"][-1]
    app_logger.warning(f"Rejected request to {request.url.path}: {field} {error['type']}")

    if error["type"] == "string_too_long":
        message = f"Field '{field}' exceeds maximum length of {error['ctx']['max_length']} characters"
    else:
        message = f"{field}: {error['msg']}"

    return JSONResponse(
        status_code=422,
        content={"detail": [{"msg": message, "type": error["type"], "loc": list(error["loc"])}]},
    )


#root endpoint
@app.get("/")
async def root():
    """Root endpoint - health check."""
    return {"message": "Movie Chat Bridge is running"}

app.include_router(chat.router, tags=["chat"])


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
