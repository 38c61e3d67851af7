# expense_frontend/navigation.py

import logging

import streamlit as st

logger = logging.getLogger(__name__)

# Route -> st.Page, filled in by the app entry point
_pages = {}

# Per-page state dropped on every route change so pages re-fetch on mount
PAGE_STATE_KEYS = [
    "categories", "categories_error",
    "tx_categories", "tx_categories_error",
    "dashboard_data", "dashboard_error", "dashboard_period",
]

CURRENT_ROUTE_KEY = "current_route"
FLASH_KEY = "flash"


def register(pages):
    """Inject the route -> page mapping. Call before st.navigation runs."""
    _pages.clear()
    _pages.update(pages)


def route_of(page):
    for route, candidate in _pages.items():
        if candidate is page or candidate.title == page.title:
            return route
    return None


def navigate(route):
    logger.debug(f"Navigating to {route}")
    st.switch_page(_pages[route])


def page_link(route, label, icon=None):
    st.page_link(_pages[route], label=label, icon=icon)


def clear_page_state(state=None):
    """Clear all cached page data"""
    state = st.session_state if state is None else state
    for key in PAGE_STATE_KEYS:
        if key in state:
            del state[key]


def enter_route(route, state=None):
    """Record the active route; returns True when it changed since the last run"""
    state = st.session_state if state is None else state
    if state.get(CURRENT_ROUTE_KEY) == route:
        return False
    clear_page_state(state)
    state[CURRENT_ROUTE_KEY] = route
    return True


def flash(message):
    st.session_state[FLASH_KEY] = message


def pop_flash():
    return st.session_state.pop(FLASH_KEY, None)
