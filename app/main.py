from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List

from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import TypeAdapter, ValidationError

from config.settings import Settings, get_settings
from relay.core.errors import ChatError, ChatValidationError, RelayError
from relay.core.memory import Turn
from relay.service import RelayErr, RelayService, gemini_model_factory


settings = get_settings()

logging.basicConfig(level=settings.log_level, format="[%(asctime)s] %(levelname)s - %(message)s")
logger = logging.getLogger("tutor_chat")

app = FastAPI(title="Tutor Chat Relay", version="1.0.0")

# CORS: allow local frontend during development
if settings.is_development:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

_turns_adapter = TypeAdapter(List[Turn])


def get_relay_service(settings: Settings = Depends(get_settings)) -> RelayService:
    if not settings.google_api_key:
        raise ChatError("Missing GOOGLE_API_KEY in environment or .env")
    return RelayService(gemini_model_factory(settings.gemini_model, settings.google_api_key))


@app.exception_handler(ChatError)
async def chat_error_handler(request: Request, exc: ChatError) -> JSONResponse:
    return JSONResponse(status_code=500, content={"message": exc.message})


async def _read_conversation(request: Request) -> List[Turn]:
    try:
        body: Any = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        body = None

    conversation = body.get("conversation") if isinstance(body, dict) else None
    if not isinstance(conversation, list):
        raise ChatValidationError("Message must be an array")

    try:
        return _turns_adapter.validate_python(conversation)
    except ValidationError as exc:
        raise ChatValidationError(str(exc)) from exc


@app.post("/api/chat")
async def chat(
    request: Request,
    relay: RelayService = Depends(get_relay_service),
    settings: Settings = Depends(get_settings),
) -> Dict[str, Any]:
    turns = await _read_conversation(request)
    logger.info(
        "Incoming chat: model=%s key_set=%s history_turns=%s",
        settings.gemini_model,
        bool(settings.google_api_key),
        len(turns),
    )

    result = await relay.send(tuple(turns), settings.system_instruction, settings.temperature)
    if isinstance(result, RelayErr):
        logger.warning("Relay reported error: %s", result.message)
        raise RelayError(result.message)

    return {"result": result.text}


@app.get("/health")
def health():
    return {"status": "ok"}


# Client bundle; registered last so the API routes take precedence.
if Path(settings.static_dir).is_dir():
    app.mount("/", StaticFiles(directory=settings.static_dir, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    logger.info("Server is running on http://localhost:%s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)
