"""
Chat proxy endpoint.

Forwards a single prompt to the language model so the API key stays on
the server. Replies are either {"text": ...} or {"error": ...}; a body
that does not carry a non-blank string prompt is always a 400.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from ecostay.api import deps
from ecostay.core.exceptions import ChatProxyError
from ecostay.core.logging import get_logger
from ecostay.services.chat import TextGenerator

logger = get_logger(__name__)

router = APIRouter(tags=["chat"])

MISSING_PROMPT = "Missing prompt"


class ChatRequest(BaseModel):
    prompt: Optional[str] = None


class ChatReply(BaseModel):
    text: str


async def read_prompt(request: Request) -> Optional[str]:
    """The prompt from a JSON body, or None when absent, blank or malformed."""
    try:
        body = await request.json()
        prompt = ChatRequest.model_validate(body).prompt
    except (ValueError, SchemaValidationError):
        return None
    if prompt is None or not prompt.strip():
        return None
    return prompt


@router.post(
    "/gemini",
    response_model=ChatReply,
    responses={400: {"description": MISSING_PROMPT}, 500: {"description": "Model call failed"}},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ChatRequest.model_json_schema()}},
        }
    },
)
async def generate_reply(
    request: Request,
    generator: TextGenerator = Depends(deps.get_text_generator),
):
    prompt = await read_prompt(request)
    if prompt is None:
        return JSONResponse(status_code=400, content={"error": MISSING_PROMPT})
    try:
        text = await generator.generate(prompt)
    except ChatProxyError as e:
        logger.error(f"Chat generation failed: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    return ChatReply(text=text)
