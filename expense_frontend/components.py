# expense_frontend/components.py

import html

import streamlit as st

SPINNER_SIZES = {
    "sm": 16,
    "md": 32,
    "lg": 48,
}

_SPINNER_CSS = """
<style>
@keyframes expense-spin { to { transform: rotate(360deg); } }
.expense-spinner {
    border-radius: 50%;
    border: 4px solid #e5e7eb;
    border-left-color: #7c3aed;
    animation: expense-spin 0.8s linear infinite;
    margin: 0 auto;
}
.expense-spinner-text {
    text-align: center;
    color: #4b5563;
    font-size: 0.875rem;
    margin-top: 0.75rem;
}
</style>
"""


def spinner_markup(size="md", text=None):
    """HTML for the in-flight indicator; depends only on size and text"""
    if size not in SPINNER_SIZES:
        raise ValueError(f"Unknown spinner size: {size!r}")
    px = SPINNER_SIZES[size]
    markup = f'<div class="expense-spinner" style="width:{px}px;height:{px}px"></div>'
    if text:
        markup += f'<p class="expense-spinner-text">{html.escape(text)}</p>'
    return _SPINNER_CSS + f'<div class="expense-loading">{markup}</div>'


def loading_indicator(size="md", text=None):
    st.markdown(spinner_markup(size, text), unsafe_allow_html=True)


def money(value):
    return f"R$ {value:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
