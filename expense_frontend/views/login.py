# expense_frontend/views/login.py

import logging

import streamlit as st

from ..api_client import ApiError
from ..components import loading_indicator
from ..config import APP_TITLE
from ..context import get_client, get_session
from ..guard import DASHBOARD, SIGNUP
from ..navigation import navigate, page_link, pop_flash
from ..session import is_valid_user_id

logger = logging.getLogger(__name__)

LOGIN_ERROR = "Erro ao fazer login"
MISSING_FIELDS = "Preencha email e senha"


def submit_login(client, session, email, password):
    """Log in and store the session. Returns an error string or None."""
    if not email or not password:
        return MISSING_FIELDS

    try:
        result = client.login(email, password)
    except ApiError as e:
        logger.error(f"Erro ao fazer login: {e}")
        return e.server_message or LOGIN_ERROR

    if not is_valid_user_id(result.user_id):
        logger.error(f"Login returned a malformed user id: {result.user_id!r}")
        return LOGIN_ERROR

    session.save(result.token, result.user_id)
    return None


def render():
    st.title(f"💰 {APP_TITLE}")
    st.caption("Acesse sua conta para gerenciar suas finanças")

    message = pop_flash()
    if message:
        st.success(f"✅ {message}")

    with st.form("login_form"):
        email = st.text_input("📧 Email", placeholder="seu@email.com")
        password = st.text_input("🔒 Senha", type="password")
        submitted = st.form_submit_button("Entrar", use_container_width=True)

    if submitted:
        status = st.empty()
        with status.container():
            loading_indicator("sm", "Entrando...")
        session = get_session()
        error = submit_login(get_client(session), session, email.strip(), password)
        status.empty()
        if error:
            st.error(f"❌ {error}")
        else:
            navigate(DASHBOARD)

    st.markdown("Não tem uma conta?")
    page_link(SIGNUP, "Cadastre-se", icon="📝")
