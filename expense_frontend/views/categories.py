# expense_frontend/views/categories.py

import logging
from dataclasses import replace

import streamlit as st

from ..api_client import ApiError
from ..components import loading_indicator, money
from ..context import get_client, get_session
from ..guard import DASHBOARD
from ..navigation import page_link

logger = logging.getLogger(__name__)

LOAD_ERROR = "Erro ao carregar categorias"
ADD_ERROR = "Erro ao adicionar categoria"
UPDATE_ERROR = "Erro ao atualizar orçamento"
INVALID_NAME = "Informe o nome da categoria"
INVALID_BUDGET = "Informe um orçamento válido"


def parse_budget(value):
    """Budget as a non-negative float, or None when the input is unusable"""
    try:
        budget = float(value)
    except (TypeError, ValueError):
        return None
    if budget != budget or budget < 0:
        return None
    return budget


def load_categories(client, session):
    """Returns (categories, error)"""
    try:
        return client.list_categories(session.user_id), None
    except ApiError as e:
        logger.error(f"Erro ao carregar categorias: {e}")
        return [], LOAD_ERROR


def add_category(client, session, categories, name, budget):
    """Create a category; the list only grows with what the server returned.

    Returns (categories, error). On failure the original list comes back as is.
    """
    name = (name or "").strip()
    if not name:
        return categories, INVALID_NAME
    budget = parse_budget(budget)
    if budget is None:
        return categories, INVALID_BUDGET

    try:
        created = client.create_category(name, budget, session.user_id)
    except ApiError as e:
        logger.error(f"Erro ao adicionar categoria: {e}")
        return categories, ADD_ERROR
    return categories + [created], None


def update_budget(client, session, categories, category_id, budget):
    """Change a budget once the server confirms it. Returns (categories, error)."""
    budget = parse_budget(budget)
    if budget is None:
        return categories, INVALID_BUDGET

    try:
        confirmed = client.update_category_budget(category_id, budget, session.user_id)
    except ApiError as e:
        logger.error(f"Erro ao atualizar orçamento: {e}")
        return categories, UPDATE_ERROR

    updated = []
    for category in categories:
        if category.id != category_id:
            updated.append(category)
        elif confirmed is not None:
            updated.append(confirmed)
        else:
            updated.append(replace(category, budget=budget))
    return updated, None


# ---------------- Rendering ----------------
def _render_add_form(client, session):
    st.subheader("➕ Adicionar Categoria")
    with st.form("add_category", clear_on_submit=True):
        name = st.text_input("Nome", key="new_category_name")
        budget = st.number_input("Orçamento", min_value=0.0, step=10.0, format="%.2f", key="new_category_budget")
        submitted = st.form_submit_button("Adicionar Categoria", use_container_width=True)

    if submitted:
        status = st.empty()
        with status.container():
            loading_indicator("sm", "Adicionando...")
        categories, error = add_category(client, session, st.session_state.categories, name, budget)
        status.empty()
        st.session_state.categories = categories
        if error:
            st.error(f"❌ {error}")
        else:
            st.success(f"✅ Categoria **{name.strip()}** adicionada")


def _render_list(client, session):
    st.subheader("📁 Suas Categorias")
    categories = st.session_state.categories
    if not categories:
        st.info("💡 Nenhuma categoria ainda. Crie a primeira acima!")
        return

    for category in categories:
        col1, col2, col3 = st.columns([2, 2, 1])
        with col1:
            st.write(f"**{category.name}**")
            st.caption(f"Orçamento atual: {money(category.budget)}")
        with col2:
            new_budget = st.number_input(
                "Orçamento",
                min_value=0.0,
                value=float(category.budget),
                step=10.0,
                format="%.2f",
                key=f"budget_{category.id}",
                label_visibility="collapsed",
            )
        with col3:
            if st.button("💾 Salvar", key=f"save_{category.id}", use_container_width=True):
                updated, error = update_budget(client, session, st.session_state.categories, category.id, new_budget)
                st.session_state.categories = updated
                if error:
                    st.error(f"❌ {error}")
                else:
                    st.rerun()


def render():
    st.title("📁 Categorias")
    page_link(DASHBOARD, "Voltar ao painel", icon="⬅️")

    session = get_session()
    client = get_client(session)

    if st.session_state.get("categories") is None:
        status = st.empty()
        with status.container():
            loading_indicator("lg", "Carregando categorias...")
        categories, error = load_categories(client, session)
        status.empty()
        st.session_state.categories = categories
        st.session_state.categories_error = error

    if st.session_state.get("categories_error"):
        st.error(f"❌ {st.session_state.categories_error}")

    _render_add_form(client, session)
    _render_list(client, session)
