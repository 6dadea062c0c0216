from typing import List

from pydantic import BaseModel


class ChatMessage(BaseModel):
    role: str
    content: str


class CompletionRequest(BaseModel):
    model: str
    messages: List[ChatMessage]

    @classmethod
    def single_turn(cls, model: str, query: str) -> "CompletionRequest":
        """One user-role turn carrying the query."""
        return cls(model=model, messages=[ChatMessage(role="user", content=query)])


class Choice(BaseModel):
    message: ChatMessage


class CompletionResponse(BaseModel):
    choices: List[Choice]  # extra fields (id, usage, ...) are ignored
