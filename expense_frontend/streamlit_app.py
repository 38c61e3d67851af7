# expense_frontend/streamlit_app.py
# Run: streamlit run expense_frontend/streamlit_app.py

import logging

import streamlit as st

from expense_frontend.config import API_BASE, APP_TITLE, setup_logging
from expense_frontend.components import loading_indicator
from expense_frontend.context import get_session, mount_cookies
from expense_frontend.guard import CATEGORIES, DASHBOARD, LOGIN, SIGNUP, TRANSACTIONS, check_route
from expense_frontend.navigation import enter_route, navigate, register, route_of
from expense_frontend.views import categories, dashboard, login, signup, transactions

logger = logging.getLogger("expense-frontend")

# ---------------- CSS ----------------
STYLE = """
<style>
h1, h2, h3, h4 {
    color: #5b21b6 !important;
    font-weight: 700;
}

.stButton>button {
    background-color: #7c3aed !important;
    color: white !important;
    border-radius: 10px;
    border: none;
}

.stButton>button:hover {
    background-color: #6d28d9 !important;
}

.stMetric {
    background: #f5f0ff !important;
    padding: 15px;
    border-radius: 12px;
    box-shadow: 0 2px 10px rgba(120, 0, 255, 0.12);
}
</style>
"""


def build_pages():
    return {
        DASHBOARD: st.Page(dashboard.render, title="Painel", icon="📊", url_path="dashboard", default=True),
        LOGIN: st.Page(login.render, title="Entrar", icon="🔐", url_path="login"),
        SIGNUP: st.Page(signup.render, title="Cadastro", icon="📝", url_path="signup"),
        CATEGORIES: st.Page(categories.render, title="Categorias", icon="📁", url_path="categories"),
        TRANSACTIONS: st.Page(transactions.render, title="Nova Transação", icon="💳", url_path="transactions"),
    }


CHECKING_TEXT = "Verificando sessão..."


def resolve_route(route, session):
    """Show the checking indicator while the session is restored and the guard runs"""
    checking = st.empty()
    with checking.container():
        loading_indicator("sm", CHECKING_TEXT)
    session.restore()
    target = check_route(route, session)
    checking.empty()
    return target


# ---------------- Main App ----------------
def main():
    setup_logging()
    st.set_page_config(page_title=APP_TITLE, page_icon="💰", layout="wide")
    st.markdown(STYLE, unsafe_allow_html=True)

    pages = build_pages()
    register(pages)
    current = st.navigation(list(pages.values()), position="hidden")
    route = route_of(current)

    if enter_route(route):
        logger.info(f"Route changed to {route} (API at {API_BASE})")

    mount_cookies()
    target = resolve_route(route, get_session())
    if target is not None and target != route:
        navigate(target)

    current.run()


if __name__ == "__main__":
    main()
