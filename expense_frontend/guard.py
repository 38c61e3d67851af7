# expense_frontend/guard.py

import logging

logger = logging.getLogger(__name__)

LOGIN = "/login"
SIGNUP = "/signup"
DASHBOARD = "/dashboard"
CATEGORIES = "/categories"
TRANSACTIONS = "/transactions"

AUTH_ROUTES = (LOGIN, SIGNUP)
GATED_ROUTES = (DASHBOARD, CATEGORIES, TRANSACTIONS)


def is_auth_route(route):
    return route in AUTH_ROUTES


def check_route(route, store):
    """Decide where the user belongs before a page renders.

    Returns the route to redirect to, or None when the page may render.
    Anything short of a complete and well formed session counts as logged out
    and is wiped so the pair is never left half set.
    """
    authenticated = store.is_authenticated()

    if not authenticated:
        if store.has_data():
            logger.warning(f"Discarding incomplete or malformed session on {route}")
        store.clear()
        if is_auth_route(route):
            return None
        return LOGIN

    if is_auth_route(route):
        return DASHBOARD
    return None


def logout(store):
    store.clear()
    logger.info("User logged out")
    return LOGIN
