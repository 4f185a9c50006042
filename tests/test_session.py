"""Tests for SimplifySession, the state behind the Streamlit app."""

from __future__ import annotations

from pathlib import Path

import pytest

from legal_simplify.models import ChatExchange
from legal_simplify.qa import EMPTY_QUESTION_PROMPT, NO_RELEVANT_ANSWER
from legal_simplify.session import SimplifySession


@pytest.fixture
def session(short_legal_text: str) -> SimplifySession:
    s = SimplifySession()
    s.load_text(short_legal_text)
    return s


class TestDefaults:
    def test_initial_state(self) -> None:
        s = SimplifySession()
        assert s.text == ""
        assert s.uploaded_name == ""
        assert s.summary_points == []
        assert s.chat_log == []
        assert s.max_points == 5
        assert s.risks == []

    def test_invalid_max_points(self) -> None:
        with pytest.raises(ValueError):
            SimplifySession(max_points=11)

    def test_set_max_points(self, session: SimplifySession) -> None:
        session.set_max_points(2)
        assert session.max_points == 2
        with pytest.raises(ValueError):
            session.set_max_points(0)
        assert session.max_points == 2


class TestSummary:
    def test_generate_summary(self, session: SimplifySession) -> None:
        session.set_max_points(2)
        points = session.generate_summary()
        assert len(points) == 2
        assert session.summary_points == points

    def test_generate_summary_clears_chat(self, session: SimplifySession) -> None:
        session.ask("What is this?")
        assert session.chat_log
        session.generate_summary()
        assert session.chat_log == []

    def test_empty_document(self) -> None:
        s = SimplifySession()
        assert s.generate_summary() == []


class TestAsk:
    def test_blank_question_is_ignored(self, session: SimplifySession) -> None:
        assert session.ask("   ") is None
        assert session.chat_log == []

    def test_pending_question(self, session: SimplifySession) -> None:
        session.question = "Can I terminate?"
        exchange = session.ask()
        assert isinstance(exchange, ChatExchange)
        assert exchange.question == "Can I terminate?"
        assert "terminate this Agreement" in exchange.answer
        assert session.question == ""

    def test_history_grows(self, session: SimplifySession) -> None:
        session.ask("What is this?")
        session.ask("What is this?")
        assert len(session.chat_log) == 2
        assert session.chat_log[0] == session.chat_log[1]

    def test_uses_current_summary(self, session: SimplifySession) -> None:
        assert session.ask("What is this?").answer == NO_RELEVANT_ANSWER
        points = session.generate_summary()
        assert session.ask("What is this?").answer == " ".join(points[:2])

    def test_empty_question_never_reaches_answerer(self) -> None:
        s = SimplifySession()
        assert s.ask("") is None
        assert EMPTY_QUESTION_PROMPT not in [c.answer for c in s.chat_log]


class TestDocument:
    def test_risks_follow_text(self, session: SimplifySession) -> None:
        assert len(session.risks) == 3
        session.load_text("Nothing risky here.")
        assert session.risks == []

    def test_load_file(self, tmp_text_file: Path, short_legal_text: str) -> None:
        s = SimplifySession()
        s.load_file(tmp_text_file)
        assert s.uploaded_name == "test_contract.txt"
        assert s.text == short_legal_text

    def test_load_file_none_is_noop(self, session: SimplifySession) -> None:
        before = session.to_dict()
        session.load_file(None)
        assert session.to_dict() == before

    def test_load_upload_bytes(self) -> None:
        s = SimplifySession()
        s.load_upload("upload.txt", "Either party may terminate.".encode("utf-8"))
        assert s.uploaded_name == "upload.txt"
        assert s.risks == ["Either party may terminate."]

    def test_load_upload_invalid_utf8(self) -> None:
        s = SimplifySession()
        s.load_upload("binary.txt", b"\xff\xfeabc")
        assert s.text.endswith("abc")
        assert "�" in s.text

    def test_load_upload_without_file(self, session: SimplifySession) -> None:
        text = session.text
        session.load_upload(None, None)
        assert session.text == text

    def test_to_dict(self, session: SimplifySession) -> None:
        session.generate_summary()
        session.ask("payment?")
        data = session.to_dict()
        assert data["max_points"] == 5
        assert len(data["chat_log"]) == 1
        assert data["chat_log"][0]["question"] == "payment?"
        assert len(data["risks"]) == 3
