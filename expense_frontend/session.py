# expense_frontend/session.py

import re
import logging
from datetime import datetime, timedelta

logger = logging.getLogger(__name__)

TOKEN_KEY = "token"
USER_ID_KEY = "userId"
SESSION_KEYS = (TOKEN_KEY, USER_ID_KEY)

COOKIE_LIFETIME = timedelta(days=30)

USER_ID_PATTERN = re.compile(r"^[0-9a-fA-F]{24}$")


def is_valid_user_id(value):
    """True when value is a 24 character hex id"""
    return isinstance(value, str) and bool(USER_ID_PATTERN.match(value))


class SessionStore:
    """The (token, userId) pair kept for the logged-in user.

    ``storage`` is the per-run mapping (``st.session_state`` in the app, a
    dict in tests). ``durable`` is the browser side copy that survives
    reloads and new tabs; anything with the CookieManager get/set/delete
    methods works.
    """

    def __init__(self, storage, durable=None):
        self.storage = storage
        self.durable = durable

    @property
    def token(self):
        return self.storage.get(TOKEN_KEY) or None

    @property
    def user_id(self):
        return self.storage.get(USER_ID_KEY) or None

    def restore(self):
        """Load the pair from browser storage when this run has none yet"""
        if self.durable is None or self.has_data():
            return False
        token = self.durable.get(TOKEN_KEY)
        user_id = self.durable.get(USER_ID_KEY)
        if not token or not user_id:
            return False
        self.storage[TOKEN_KEY] = token
        self.storage[USER_ID_KEY] = user_id
        logger.info(f"Session restored from browser storage for user {user_id}")
        return True

    def save(self, token, user_id):
        self.storage[TOKEN_KEY] = token
        self.storage[USER_ID_KEY] = user_id
        if self.durable is not None:
            expires_at = datetime.now() + COOKIE_LIFETIME
            self.durable.set(TOKEN_KEY, token, expires_at=expires_at, key="save_token")
            self.durable.set(USER_ID_KEY, user_id, expires_at=expires_at, key="save_user_id")
        logger.info(f"Session stored for user {user_id}")

    def clear(self):
        for key in SESSION_KEYS:
            if key in self.storage:
                del self.storage[key]
            # deleting a cookie the browser never sent is an error
            if self.durable is not None and self.durable.get(key) is not None:
                self.durable.delete(key, key=f"clear_{key}")

    def has_data(self):
        """True when either value is present, valid or not"""
        return bool(self.token or self.user_id)

    def is_authenticated(self):
        """Both values present and the user id well formed"""
        token = self.token
        if not isinstance(token, str) or not token:
            return False
        return is_valid_user_id(self.user_id)
