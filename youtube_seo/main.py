import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import HTMLResponse, JSONResponse

from youtube_seo.config import configure_logging, load_settings
from youtube_seo.constants import EMPTY_TOPIC_MESSAGE
from youtube_seo.errors import GenerationInProgressError, TopicValidationError
from youtube_seo.generation import GeminiContentClient
from youtube_seo.models import (
    ApiError,
    CopyRequest,
    CopyResponse,
    Displaying,
    GenerateContentRequest,
    SessionView,
)
from youtube_seo.orchestration import (
    Session,
    SessionNotFoundError,
    SessionRegistry,
    validate_topic,
)
from youtube_seo.presentation import copy_key, copy_text, result_for_state, summarize_state
from youtube_seo.presentation.page import INDEX_HTML

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load settings and build the provider. A missing API key aborts startup."""
    if getattr(app.state, "sessions", None) is None:
        settings = load_settings()
        configure_logging(settings.log_level)
        app.state.sessions = SessionRegistry(
            GeminiContentClient(settings),
            interstitial_seconds=settings.interstitial_seconds,
        )
        logger.info("YouTube SEO Content Generator ready")

    yield

    await app.state.sessions.shutdown()


app = FastAPI(title="YouTube SEO Content Generator", version="0.1.0", lifespan=lifespan)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",  # For local frontend development
        "http://localhost:8000",  # For local backend development
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def get_session(session_id: str, sessions: SessionRegistry = Depends(get_sessions)) -> Session:
    try:
        return sessions.get(session_id)
    except SessionNotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={
                "error": "Session not found",
                "detail": f"No session with id '{session_id}'",
            },
        ) from e


def invalid_topic(session_id: Optional[str]) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail={
            "error": "Invalid topic",
            "detail": EMPTY_TOPIC_MESSAGE,
            "session_id": session_id,
        },
    )


def session_view(session: Session) -> SessionView:
    state = session.controller.state
    return SessionView(
        session_id=session.session_id,
        topic=session.controller.topic,
        state=summarize_state(state),
        result=result_for_state(state, session.controller.topic),
        copied=session.copies.copied_keys(),
    )


@app.get("/", response_class=HTMLResponse)
async def index() -> str:
    """Browser form."""
    return INDEX_HTML


@app.get("/health")
async def health_check():
    """Health check endpoint for monitoring."""
    return {"status": "healthy"}


@app.post(
    "/content/generate",
    response_model=SessionView,
    status_code=status.HTTP_202_ACCEPTED,
    responses={
        400: {"model": ApiError, "description": "Blank topic"},
        409: {"model": ApiError, "description": "Generation already in progress"},
    },
    tags=["Content"],
)
async def generate_content(
    payload: GenerateContentRequest,
    sessions: SessionRegistry = Depends(get_sessions),
) -> SessionView:
    """
    Start generating titles, description, tags, SEO score and thumbnails.

    Generation runs in the background: poll `GET /content/sessions/{session_id}`
    until the state is `displaying` or `failed`.

    **Example:**
    ```bash
    curl -X POST "http://localhost:8000/content/generate" \\
      -H "Content-Type: application/json" \\
      -d '{"topic": "How to bake a sourdough bread"}'
    ```
    """
    if payload.session_id is None:
        # Nothing to show the message on, so no session is created
        try:
            validate_topic(payload.topic)
        except TopicValidationError as e:
            raise invalid_topic(None) from e

    session = sessions.get_or_create(payload.session_id)

    try:
        accepted = sessions.start(session, payload.topic)
    except GenerationInProgressError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "error": "Generation in progress",
                "detail": str(e),
                "session_id": session.session_id,
            },
        ) from e

    if not accepted:
        raise invalid_topic(session.session_id)

    return session_view(session)


@app.get(
    "/content/sessions/{session_id}",
    response_model=SessionView,
    responses={404: {"model": ApiError, "description": "Session not found"}},
    tags=["Content"],
)
async def get_session_state(session: Session = Depends(get_session)) -> SessionView:
    """Current state of a session, with the result view once displaying."""
    return session_view(session)


@app.post(
    "/content/sessions/{session_id}/copy",
    response_model=CopyResponse,
    responses={
        400: {"model": ApiError, "description": "Title index out of range"},
        404: {"model": ApiError, "description": "Session not found"},
        409: {"model": ApiError, "description": "No result displayed"},
    },
    tags=["Content"],
)
async def copy_field(payload: CopyRequest, session: Session = Depends(get_session)) -> CopyResponse:
    """
    Return the text for a copy button and show its confirmation for 2 seconds.

    Titles are copied one at a time (`index` required); tags are joined with ", ".
    """
    state = session.controller.state
    if not isinstance(state, Displaying):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "error": "No result displayed",
                "detail": f"Session is {state.kind}",
            },
        )

    try:
        text = copy_text(state.content, payload.field, payload.index)
    except IndexError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"error": "Invalid copy target", "detail": str(e)},
        ) from e

    key = copy_key(payload.field, payload.index)
    session.copies.mark(key)

    return CopyResponse(key=key, text=text, copied=session.copies.copied_keys())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Return a concise, friendly 422 payload."""
    errors = []
    for err in exc.errors():
        location_parts = [str(part) for part in err.get("loc", []) if part != "body"]
        errors.append(
            {
                "field": "body" if not location_parts else ".".join(location_parts),
                "message": err.get("msg"),
            }
        )

    return JSONResponse(
        status_code=422,
        content={
            "detail": "Invalid request payload",
            "errors": errors,
        },
    )


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("youtube_seo.main:app", host="0.0.0.0", port=8000, reload=True)
