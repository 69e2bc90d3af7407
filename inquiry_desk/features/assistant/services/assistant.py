from dataclasses import dataclass, field
from typing import List, Literal, Optional, Tuple

GREETING = (
    "Hello! I'm Areesha. I specialize in building custom AI-integrated web applications. "
    "How can I help you with your technical requirements today?"
)

# Checked in order; the first group with a matching substring wins.
KEYWORD_GROUPS: List[Tuple[str, Tuple[str, ...], str]] = [
    (
        "skills",
        ("skill", "tech", "stack"),
        "My core stack involves React, TypeScript, and Tailwind CSS. For backend and automation, "
        "I utilize Supabase and custom LLM integrations to build intelligent systems.",
    ),
    (
        "projects",
        ("project", "portfolio"),
        "I engineer high-performance web solutions with a focus on AI automation. "
        "You can view my featured technical projects in the portfolio section above.",
    ),
    (
        "pricing",
        ("price", "cost", "budget"),
        "Project costs are determined by the technical scope and complexity of the integration. "
        "I focus on delivering high-value, scalable solutions tailored to your needs.",
    ),
    (
        "timeline",
        ("time", "delivery", "fast"),
        "I follow an iterative development process. For initial project scoping, "
        "I typically provide a functional staging preview within a few hours.",
    ),
    (
        "contact",
        ("contact", "hire", "reach"),
        "You can initiate a professional inquiry through the contact section or by submitting "
        "a project scoping form. I look forward to discussing your architecture!",
    ),
]

DEFAULT_REPLY = (
    "That's an interesting technical requirement. I'm happy to discuss my engineering process, "
    "stack preferences, or specific AI integration capabilities."
)


def match_topic(question: str) -> str:
    q = question.lower()
    for topic, keywords, _ in KEYWORD_GROUPS:
        if any(keyword in q for keyword in keywords):
            return topic
    return "default"


REPLIES = {topic: reply for topic, _, reply in KEYWORD_GROUPS}


def get_reply(question: str) -> str:
    return REPLIES.get(match_topic(question), DEFAULT_REPLY)


@dataclass
class ChatMessage:
    id: int
    type: Literal["bot", "user"]
    content: str


@dataclass
class Conversation:
    """Transcript for a single page view. Nothing is persisted."""

    messages: List[ChatMessage] = field(
        default_factory=lambda: [ChatMessage(id=1, type="bot", content=GREETING)]
    )

    def send(self, text: str) -> Optional[ChatMessage]:
        """Append the visitor message and the bot reply; blank input is ignored."""
        content = text.strip()
        if not content:
            return None

        self.messages.append(ChatMessage(id=len(self.messages) + 1, type="user", content=content))
        reply = ChatMessage(id=len(self.messages) + 1, type="bot", content=get_reply(content))
        self.messages.append(reply)
        return reply
