# expense_frontend/views/signup.py

import logging

import streamlit as st

from ..api_client import ApiError
from ..components import loading_indicator
from ..context import get_client
from ..guard import LOGIN
from ..navigation import flash, navigate, page_link

logger = logging.getLogger(__name__)

SIGNUP_FAILED = "Falha no cadastro"
SIGNUP_ERROR = "Erro ao cadastrar usuário"
MISSING_FIELDS = "Preencha nome, email e senha"


def submit_signup(client, name, email, password):
    """Create the account. Returns an error string or None."""
    if not name or not email or not password:
        return MISSING_FIELDS

    try:
        client.signup(name, email, password)
    except ApiError as e:
        logger.error(f"Erro ao cadastrar usuário: {e}")
        if e.status_code is None:
            return SIGNUP_ERROR
        return e.server_message or SIGNUP_FAILED
    return None


def render():
    st.title("📝 Crie sua conta")

    with st.form("signup_form"):
        name = st.text_input("👤 Nome", placeholder="Nome")
        email = st.text_input("📧 Email", placeholder="seu@email.com")
        password = st.text_input("🔒 Senha", type="password")
        submitted = st.form_submit_button("Cadastrar", use_container_width=True)

    if submitted:
        status = st.empty()
        with status.container():
            loading_indicator("sm", "Cadastrando...")
        error = submit_signup(get_client(), name.strip(), email.strip(), password)
        status.empty()
        if error:
            st.error(f"❌ {error}")
        else:
            flash("Conta criada! Faça login para continuar.")
            navigate(LOGIN)

    st.markdown("Já tem uma conta?")
    page_link(LOGIN, "Entrar", icon="🔐")
