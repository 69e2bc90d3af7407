from pydantic import BaseModel, Field


class AssistantQuestion(BaseModel):
    message: str = Field(..., min_length=1, max_length=1000)


class AssistantReply(BaseModel):
    topic: str
    reply: str
