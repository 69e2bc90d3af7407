from fastapi import APIRouter

from inquiry_desk.features.assistant.schemas.assistant import AssistantQuestion, AssistantReply
from inquiry_desk.features.assistant.services.assistant import get_reply, match_topic
from inquiry_desk.platform.response import api_response

router = APIRouter(prefix="/assistant", tags=["Assistant"])


@router.post("/reply")
async def assistant_reply(question: AssistantQuestion):
    """Canned FAQ reply; stateless, nothing stored."""
    return api_response(
        data=AssistantReply(topic=match_topic(question.message), reply=get_reply(question.message)),
        message="Reply generated",
    )
