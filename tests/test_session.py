import pytest

from expense_frontend.session import SessionStore, TOKEN_KEY, USER_ID_KEY, is_valid_user_id

from tests.helpers import FakeCookies, TOKEN, USER_ID


class TestUserIdFormat:
    """Tests for the 24 character hex user id rule."""

    @pytest.mark.parametrize("value", [USER_ID, "ABCDEF0123456789abcdef01", "0" * 24])
    def test_valid_ids(self, value):
        assert is_valid_user_id(value)

    @pytest.mark.parametrize(
        "value",
        [None, "", "123", "g" * 24, USER_ID + "0", USER_ID[:-1], " " + USER_ID[1:], 12345],
    )
    def test_invalid_ids(self, value):
        assert not is_valid_user_id(value)


class TestSessionStore:
    """Tests for SessionStore."""

    def test_save_writes_both_keys(self, storage, store):
        store.save(TOKEN, USER_ID)

        assert storage == {TOKEN_KEY: TOKEN, USER_ID_KEY: USER_ID}
        assert store.token == TOKEN
        assert store.user_id == USER_ID

    def test_empty_store(self, store):
        assert store.token is None
        assert store.user_id is None
        assert not store.has_data()
        assert not store.is_authenticated()

    def test_clear_removes_both_keys(self, storage, logged_in):
        storage["other"] = "kept"

        logged_in.clear()

        assert storage == {"other": "kept"}

    def test_clear_is_idempotent(self, storage, store):
        store.clear()
        store.clear()

        assert storage == {}

    def test_authenticated_with_complete_session(self, logged_in):
        assert logged_in.is_authenticated()

    def test_token_without_user_id_is_not_authenticated(self):
        store = SessionStore({TOKEN_KEY: TOKEN})

        assert store.has_data()
        assert not store.is_authenticated()

    def test_user_id_without_token_is_not_authenticated(self):
        store = SessionStore({USER_ID_KEY: USER_ID})

        assert not store.is_authenticated()

    def test_malformed_user_id_is_not_authenticated(self):
        store = SessionStore({TOKEN_KEY: TOKEN, USER_ID_KEY: "not-a-valid-id"})

        assert not store.is_authenticated()

    def test_empty_strings_count_as_missing(self):
        store = SessionStore({TOKEN_KEY: "", USER_ID_KEY: ""})

        assert store.token is None
        assert store.user_id is None
        assert not store.has_data()


class TestBrowserStorage:
    """Tests for the cookie-backed copy of the session."""

    def test_fresh_run_restores_the_pair(self):
        cookies = FakeCookies({TOKEN_KEY: TOKEN, USER_ID_KEY: USER_ID})
        store = SessionStore({}, durable=cookies)

        assert store.restore()
        assert store.is_authenticated()
        assert store.token == TOKEN
        assert store.user_id == USER_ID

    def test_login_then_new_tab(self):
        cookies = FakeCookies()
        SessionStore({}, durable=cookies).save(TOKEN, USER_ID)

        new_tab = SessionStore({}, durable=cookies)
        new_tab.restore()

        assert new_tab.is_authenticated()

    def test_half_cookie_pair_is_not_restored(self):
        store = SessionStore({}, durable=FakeCookies({TOKEN_KEY: TOKEN}))

        assert not store.restore()
        assert not store.has_data()

    def test_restore_keeps_current_run_values(self):
        storage = {TOKEN_KEY: "current", USER_ID_KEY: USER_ID}
        store = SessionStore(storage, durable=FakeCookies({TOKEN_KEY: TOKEN, USER_ID_KEY: USER_ID}))

        assert not store.restore()
        assert store.token == "current"

    def test_clear_removes_cookies(self):
        cookies = FakeCookies({TOKEN_KEY: TOKEN, USER_ID_KEY: USER_ID})
        store = SessionStore({}, durable=cookies)
        store.restore()

        store.clear()

        assert cookies.cookies == {}
        assert not SessionStore({}, durable=cookies).restore()

    def test_clear_skips_missing_cookies(self):
        cookies = FakeCookies({USER_ID_KEY: USER_ID})

        SessionStore({}, durable=cookies).clear()
        SessionStore({}, durable=cookies).clear()

        assert cookies.cookies == {}
        assert cookies.component_keys == ["clear_userId"]

    def test_save_uses_distinct_component_keys(self):
        cookies = FakeCookies()

        SessionStore({}, durable=cookies).save(TOKEN, USER_ID)

        assert len(set(cookies.component_keys)) == 2
