import pytest

from inquiry_desk.features.assistant.services.assistant import (
    DEFAULT_REPLY,
    GREETING,
    REPLIES,
    Conversation,
    get_reply,
    match_topic,
)


@pytest.mark.parametrize(
    "question,topic",
    [
        ("What skills do you have?", "skills"),
        ("Which TECH do you use", "skills"),
        ("Can I see a project?", "projects"),
        ("How much does it cost?", "pricing"),
        ("What is your budget range", "pricing"),
        ("How fast is delivery?", "timeline"),
        ("How do I hire you", "contact"),
        ("Hello there", "default"),
    ],
)
def test_match_topic(question, topic):
    assert match_topic(question) == topic


def test_first_matching_group_wins():
    # Mentions both the stack and the price; skills is checked first
    assert match_topic("what tech stack and what price?") == "skills"
    assert get_reply("what tech stack and what price?") == REPLIES["skills"]


def test_unmatched_question_gets_default_reply():
    assert get_reply("Do you like cats?") == DEFAULT_REPLY


def test_conversation_starts_with_greeting():
    conversation = Conversation()
    assert len(conversation.messages) == 1
    assert conversation.messages[0].type == "bot"
    assert conversation.messages[0].content == GREETING


def test_conversation_send_appends_both_sides():
    conversation = Conversation()

    reply = conversation.send("  What does it cost?  ")

    assert reply.content == REPLIES["pricing"]
    assert [m.type for m in conversation.messages] == ["bot", "user", "bot"]
    assert conversation.messages[1].content == "What does it cost?"
    assert [m.id for m in conversation.messages] == [1, 2, 3]


def test_conversation_ignores_blank_input():
    conversation = Conversation()
    assert conversation.send("   ") is None
    assert len(conversation.messages) == 1


def test_assistant_endpoint(client):
    response = client.post("/api/v1/assistant/reply", json={"message": "How can I contact you?"})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["topic"] == "contact"
    assert data["reply"] == REPLIES["contact"]


def test_assistant_endpoint_rejects_empty_message(client):
    response = client.post("/api/v1/assistant/reply", json={"message": ""})
    assert response.status_code == 422
