# expense_frontend/views/dashboard.py

import logging
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass
from datetime import date
from typing import List

import pandas as pd
import streamlit as st

from ..aggregation import category_spend, expense_pie, filter_month, monthly_totals, transactions_frame
from ..components import loading_indicator, money
from ..config import APP_TITLE
from ..context import get_client, get_session
from ..guard import CATEGORIES, TRANSACTIONS, logout
from ..models import Category, Transaction, EXPENSE
from ..navigation import clear_page_state, navigate, page_link
from ..session import is_valid_user_id

logger = logging.getLogger(__name__)

DASHBOARD_ERROR = "Falha ao carregar os dados do painel. Tente novamente mais tarde."
INVALID_USER_ID = "ID de usuário inválido. Faça login novamente."

MONTHS = [
    "Janeiro", "Fevereiro", "Março", "Abril", "Maio", "Junho",
    "Julho", "Agosto", "Setembro", "Outubro", "Novembro", "Dezembro",
]


class DashboardError(Exception):
    """The dashboard could not be built; carries the message shown to the user"""


@dataclass
class DashboardData:
    transactions: List[Transaction]
    categories: List[Category]
    balance: float


@dataclass
class DashboardSummary:
    transactions: pd.DataFrame
    expenses: float
    revenue: float
    spend: list


def year_options(today=None, count=5):
    today = today or date.today()
    return [today.year - i for i in range(count)]


def load_dashboard(client, user_id, month, year):
    """Fetch transactions, categories and the user in parallel.

    All three must succeed. Any failure is logged and collapsed into a single
    DashboardError; requests still in flight are left to finish and ignored.
    """
    if not is_valid_user_id(user_id):
        logger.error(f"Invalid userId format: {user_id!r}")
        raise DashboardError(INVALID_USER_ID)

    logger.info(f"Loading dashboard for {user_id} ({month}/{year})")
    with ThreadPoolExecutor(max_workers=3) as pool:
        futures = {
            "transactions": pool.submit(client.list_transactions, user_id, month, year),
            "categories": pool.submit(client.list_categories, user_id),
            "user": pool.submit(client.get_user, user_id),
        }
        wait(futures.values())

    failed = False
    for name, future in futures.items():
        error = future.exception()
        if error is not None:
            failed = True
            logger.error(f"Failed to fetch {name}: {error}")
    if failed:
        raise DashboardError(DASHBOARD_ERROR)

    return DashboardData(
        transactions=futures["transactions"].result(),
        categories=futures["categories"].result(),
        balance=futures["user"].result().balance,
    )


def summarize(data, month, year):
    frame = filter_month(transactions_frame(data.transactions), month, year)
    expenses, revenue = monthly_totals(frame)
    return DashboardSummary(
        transactions=frame,
        expenses=expenses,
        revenue=revenue,
        spend=category_spend(data.categories, frame),
    )


# ---------------- Rendering ----------------
def _header():
    col1, col2, col3, col4 = st.columns([3, 1, 1, 1])
    col1.title(f"📊 {APP_TITLE}")
    with col2:
        page_link(TRANSACTIONS, "Adicionar Transação", icon="➕")
    with col3:
        page_link(CATEGORIES, "Gerenciar Categorias", icon="📁")
    with col4:
        if st.button("🚪 Sair", use_container_width=True, key="logout_btn"):
            clear_page_state()
            navigate(logout(get_session()))


def _period_selector():
    today = date.today()
    years = year_options(today)
    col1, col2 = st.columns(2)
    with col1:
        month_name = st.selectbox("📅 Mês", MONTHS, index=today.month - 1, key="dashboard_month")
    with col2:
        year = st.selectbox("Ano", years, index=0, key="dashboard_year")
    return MONTHS.index(month_name) + 1, year


def _render_transactions(frame):
    st.subheader("🕒 Transações do mês")
    if frame.empty:
        st.info("Nenhuma transação neste período")
        return

    rows = frame.sort_values("date", ascending=False).copy()
    rows["Valor"] = [
        ("-" if tx_type == EXPENSE else "+") + money(amount)
        for tx_type, amount in zip(rows["type"], rows["amount"])
    ]
    rows["Data"] = rows["date"].dt.strftime("%d/%m/%Y")
    rows["Categoria"] = rows["category"].fillna("")
    rows["Descrição"] = rows["description"]
    st.dataframe(rows[["Data", "Descrição", "Categoria", "Valor"]], use_container_width=True, hide_index=True)


def _render_budgets(spend):
    st.subheader("📁 Orçamento por Categoria")
    if not spend:
        st.info("Nenhuma categoria cadastrada")
        return

    for item in spend:
        st.write(f"**{item.name}**")
        st.caption(f"Gasto: {money(item.spent)} • Orçamento: {money(item.budget)}")
        st.progress(item.bar_width / 100)
        if not item.has_budget:
            st.caption("Sem orçamento definido")
        elif item.over_budget:
            st.caption(f"🔴 Acima do orçamento ({item.percent:.1f}%)")
        else:
            st.caption(f"{item.percent:.1f}% do orçamento")


def render():
    _header()
    month, year = _period_selector()
    session = get_session()

    if st.session_state.get("dashboard_period") != (month, year):
        st.session_state.dashboard_data = None
        st.session_state.dashboard_error = None

    if st.session_state.get("dashboard_data") is None and not st.session_state.get("dashboard_error"):
        status = st.empty()
        with status.container():
            loading_indicator("lg", "Carregando dados...")
        try:
            st.session_state.dashboard_data = load_dashboard(get_client(session), session.user_id, month, year)
            st.session_state.dashboard_error = None
        except DashboardError as e:
            logger.error(f"Error fetching data: {e}")
            st.session_state.dashboard_error = str(e)
        st.session_state.dashboard_period = (month, year)
        status.empty()

    error = st.session_state.get("dashboard_error")
    if error:
        st.error(f"❌ {error}")
        if error == INVALID_USER_ID:
            if st.button("🔐 Fazer login novamente", key="relogin"):
                clear_page_state()
                navigate(logout(session))
        elif st.button("🔄 Tentar novamente", key="retry_dashboard"):
            clear_page_state()
            st.rerun()
        return

    data = st.session_state.dashboard_data
    summary = summarize(data, month, year)

    col1, col2, col3 = st.columns(3)
    col1.metric("💰 Saldo", money(data.balance))
    col2.metric("💸 Despesas do mês", money(summary.expenses))
    col3.metric("💵 Receitas do mês", money(summary.revenue))

    col1, col2 = st.columns([1, 1])
    with col1:
        fig = expense_pie(summary.spend)
        if fig is not None:
            st.plotly_chart(fig, use_container_width=True)
        else:
            st.info("Nenhuma despesa categorizada neste período")
    with col2:
        _render_transactions(summary.transactions)

    _render_budgets(summary.spend)
