# expense_frontend/context.py
# the one place views get their session and API client from

import extra_streamlit_components as stx
import streamlit as st

from .api_client import ExpenseApiClient
from .session import SessionStore

COOKIE_MANAGER_KEY = "_cookie_manager"


def mount_cookies():
    """Render the cookie component once per run and keep it for this session"""
    st.session_state[COOKIE_MANAGER_KEY] = stx.CookieManager(key="session_cookies")
    return st.session_state[COOKIE_MANAGER_KEY]


def get_session():
    return SessionStore(st.session_state, durable=st.session_state.get(COOKIE_MANAGER_KEY))


def get_client(session=None):
    session = session or get_session()
    return ExpenseApiClient(token=session.token)
