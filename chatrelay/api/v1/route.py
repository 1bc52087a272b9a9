from fastapi import APIRouter, Request
from chatrelay.service.chat.chat import relay_service
from chatrelay.model.chat.chat_request import ChatRequest
from chatrelay.model.chat.chat_response import ChatResponse, ErrorResponse

api_router = APIRouter()


async def _read_request(request: Request) -> ChatRequest:
    try:
        payload = await request.json()
    except ValueError:
        payload = {}
    if not isinstance(payload, dict):
        payload = {}
    return ChatRequest.model_validate(payload)


@api_router.post(
    "/chat",
    response_model=ChatResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def chat_request(request: Request):
    req = await _read_request(request)
    return await relay_service(req.message, req.history)
