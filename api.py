"""
Verbalizer — FastAPI Server
===========================

RESTful API for converting numbers to words.

Endpoints:
    POST /convert           Convert one value into one language
    POST /convert/all       Convert one value into several (or all) languages
    GET  /languages         Supported language codes and names
    GET  /health            Health check / readiness probe

Send large or precise values as JSON strings ("123456789012345678901.50"):
a JSON number may be rounded by the client before it ever arrives.

Run:
    uvicorn api:app --reload              # Dev (http://localhost:8000)
    uvicorn api:app --host 0.0.0.0        # Production

Docs:
    http://localhost:8000/docs             # Swagger UI (auto-generated)
    http://localhost:8000/redoc            # ReDoc (alternative)
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

import verbalizer
from verbalizer import config
from verbalizer.dispatcher import convert, convert_many, get_strategy, supported_languages
from verbalizer.exceptions import UnsupportedLanguageError
from verbalizer.models import LanguageInfo, SpecialValue
from verbalizer.normalizer import classify

# ─── Load .env if available ──────────────────────────────────────────
try:
    from dotenv import load_dotenv

    load_dotenv()
except ImportError:
    pass


# ─── Application Lifespan (validate configuration) ──────────────────

_default_language: str | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Resolve the default language on startup; a bad value fails loudly."""
    global _default_language  # noqa: PLW0603
    config.configure_logging()
    _default_language = get_strategy(config.default_language()).code
    yield
    _default_language = None


# ─── FastAPI App ─────────────────────────────────────────────────────

app = FastAPI(
    title="Verbalizer API",
    description=(
        "Lossless number-to-words conversion in fifteen languages. "
        "Values beyond double precision are converted digit-exact when sent as text."
    ),
    version=verbalizer.__version__,
    lifespan=lifespan,
)


# ─── Request / Response Schemas ─────────────────────────────────────

NumberValue = Union[str, int, float]


class ConvertRequest(BaseModel):
    """Request body for the /convert endpoint."""

    value: NumberValue = Field(
        ...,
        description="The number to convert. Prefer a string for exact digits.",
        json_schema_extra={"example": "1250000.75"},
    )
    language: Optional[str] = Field(
        default=None,
        description="Language code (see /languages). Defaults to the server's default language.",
        json_schema_extra={"example": "fr"},
    )


class ConvertResponse(BaseModel):
    value: str
    language: str
    words: str
    special: Optional[SpecialValue] = None

    model_config = {"json_schema_extra": {"example": {
        "value": "1250000.75",
        "language": "en",
        "words": "One Million Two Hundred Fifty Thousand point Seven Five",
        "special": None,
    }}}


class ConvertAllRequest(BaseModel):
    """Request body for the /convert/all endpoint."""

    value: NumberValue
    languages: Optional[list[str]] = Field(
        default=None,
        description="Language codes to convert into. Omit for all languages.",
    )


class ConvertAllResponse(BaseModel):
    value: str
    special: Optional[SpecialValue] = None
    results: dict[str, str]


class HealthResponse(BaseModel):
    status: str
    version: str
    default_language: str
    languages_loaded: int


# ─── Helpers ─────────────────────────────────────────────────────────


def _get_default_language() -> str:
    if _default_language is None:
        raise HTTPException(status_code=503, detail="Service not initialised")
    return _default_language


def _unsupported(exc: UnsupportedLanguageError) -> HTTPException:
    return HTTPException(
        status_code=400,
        detail={"code": exc.code, "message": str(exc), "details": exc.details},
    )


# ─── Endpoints ───────────────────────────────────────────────────────


@app.post(
    "/convert",
    summary="Convert a number to words",
    tags=["Conversion"],
    responses={
        400: {"description": "Unsupported language code"},
        503: {"description": "Service not yet initialised"},
    },
)
def convert_value(request: ConvertRequest) -> ConvertResponse:
    """Convert one value into one language.

    Invalid numbers, zero and infinities are not errors: they return the
    language's fixed phrase, with **special** telling which one it was.
    """
    language = request.language or _get_default_language()
    try:
        words = convert(request.value, language)
    except UnsupportedLanguageError as exc:
        raise _unsupported(exc)
    return ConvertResponse(
        value=str(request.value),
        language=language,
        words=words,
        special=classify(request.value),
    )


@app.post(
    "/convert/all",
    summary="Convert a number into several languages",
    tags=["Conversion"],
    responses={400: {"description": "Unsupported language code"}},
)
def convert_value_all(request: ConvertAllRequest) -> ConvertAllResponse:
    """Convert one value into every requested language (all when omitted)."""
    try:
        results = convert_many(request.value, request.languages)
    except UnsupportedLanguageError as exc:
        raise _unsupported(exc)
    return ConvertAllResponse(
        value=str(request.value),
        special=classify(request.value),
        results=results,
    )


@app.get("/languages", summary="Supported languages", tags=["Conversion"])
def list_languages() -> list[LanguageInfo]:
    """Language codes and display names, sorted by name."""
    return supported_languages()


@app.get(
    "/health",
    summary="Health check",
    tags=["System"],
    responses={503: {"description": "Service not yet initialised"}},
)
def health_check() -> HealthResponse:
    """Returns service status and configuration info."""
    return HealthResponse(
        status="healthy",
        version=verbalizer.__version__,
        default_language=_get_default_language(),
        languages_loaded=len(supported_languages()),
    )
