import pytest

from expense_frontend import streamlit_app
from expense_frontend.guard import DASHBOARD, LOGIN
from expense_frontend.session import SessionStore, TOKEN_KEY, USER_ID_KEY

from tests.helpers import FakeCookies, TOKEN, USER_ID


class FakePlaceholder:
    def __init__(self, events):
        self.events = events

    def container(self):
        return self

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False

    def empty(self):
        self.events.append("cleared")


@pytest.fixture
def events(monkeypatch):
    events = []
    monkeypatch.setattr(streamlit_app.st, "empty", lambda: FakePlaceholder(events))
    monkeypatch.setattr(
        streamlit_app, "loading_indicator", lambda size, text: events.append(("shown", size, text))
    )
    return events


class TestResolveRoute:
    """Tests for the session check that runs before every page."""

    def test_indicator_shown_then_cleared(self, events):
        target = streamlit_app.resolve_route(DASHBOARD, SessionStore({}))

        assert target == LOGIN
        assert events == [("shown", "sm", streamlit_app.CHECKING_TEXT), "cleared"]

    def test_restored_session_leaves_login(self, events):
        cookies = FakeCookies({TOKEN_KEY: TOKEN, USER_ID_KEY: USER_ID})

        assert streamlit_app.resolve_route(LOGIN, SessionStore({}, durable=cookies)) == DASHBOARD

    def test_restored_session_stays_on_dashboard(self, events):
        cookies = FakeCookies({TOKEN_KEY: TOKEN, USER_ID_KEY: USER_ID})

        assert streamlit_app.resolve_route(DASHBOARD, SessionStore({}, durable=cookies)) is None
