# expense_frontend/views/transactions.py

import logging
from dataclasses import dataclass
from datetime import date
from typing import Optional

import streamlit as st

from ..api_client import ApiError
from ..components import loading_indicator
from ..context import get_client, get_session
from ..guard import DASHBOARD
from ..models import EXPENSE, REVENUE
from ..navigation import navigate, page_link

logger = logging.getLogger(__name__)

CATEGORY_REQUIRED = "Categoria é obrigatória para despesas"
INVALID_AMOUNT = "Informe um valor maior que zero"
CREATE_FAILED = "Falha ao criar transação"
CREATE_ERROR = "Erro ao criar transação"

TYPE_LABELS = {EXPENSE: "Despesa", REVENUE: "Receita"}


@dataclass
class TransactionForm:
    amount: Optional[float]
    type: str
    description: str
    date: date
    category: Optional[str] = None


def parse_amount(value):
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return None
    if amount != amount or amount <= 0:
        return None
    return amount


def load_category_names(client, session):
    """Returns (names, error); the first name is the form's default choice"""
    try:
        categories = client.list_categories(session.user_id)
    except ApiError as e:
        logger.error(f"Error fetching categories: {e}")
        return [], "Erro ao carregar categorias"
    return [c.name for c in categories], None


def submit_transaction(client, session, form):
    """Validate and send a new transaction. Returns an error string or None."""
    if form.type not in (EXPENSE, REVENUE):
        return CREATE_FAILED
    if form.type == EXPENSE and not form.category:
        return CATEGORY_REQUIRED
    amount = parse_amount(form.amount)
    if amount is None:
        return INVALID_AMOUNT

    try:
        client.create_transaction(
            user_id=session.user_id,
            amount=amount,
            tx_type=form.type,
            description=(form.description or "").strip(),
            tx_date=form.date,
            category=form.category if form.type == EXPENSE else None,
        )
    except ApiError as e:
        logger.error(f"Erro ao criar transação: {e}")
        if e.status_code is None:
            return CREATE_ERROR
        return e.server_message or CREATE_FAILED
    return None


def render():
    st.title("💳 Nova Transação")
    page_link(DASHBOARD, "Voltar ao painel", icon="⬅️")

    session = get_session()
    client = get_client(session)

    if st.session_state.get("tx_categories") is None:
        status = st.empty()
        with status.container():
            loading_indicator("lg", "Carregando categorias...")
        names, error = load_category_names(client, session)
        status.empty()
        st.session_state.tx_categories = names
        st.session_state.tx_categories_error = error

    if st.session_state.get("tx_categories_error"):
        st.warning(f"⚠️ {st.session_state.tx_categories_error}")

    tx_type = st.radio(
        "🔸 Tipo",
        [EXPENSE, REVENUE],
        format_func=TYPE_LABELS.get,
        horizontal=True,
        key="tx_type",
    )

    with st.form("new_transaction"):
        amount = st.number_input("💰 Valor", min_value=0.0, step=10.0, format="%.2f", key="tx_amount")
        category = None
        if tx_type == EXPENSE:
            names = st.session_state.tx_categories
            category = st.selectbox("📁 Categoria", names, index=0 if names else None, key="tx_category")
        description = st.text_input("📝 Descrição", key="tx_description")
        tx_date = st.date_input("📅 Data", value=date.today(), key="tx_date")
        submitted = st.form_submit_button("💾 Salvar Transação", use_container_width=True)

    if submitted:
        form = TransactionForm(
            amount=amount,
            type=tx_type,
            description=description,
            date=tx_date,
            category=category,
        )
        error = submit_transaction(client, session, form)
        if error:
            st.error(f"❌ {error}")
        else:
            navigate(DASHBOARD)
