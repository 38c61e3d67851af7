# expense_frontend/api_client.py

import logging

import requests

from . import config
from .models import Category, FormatError, LoginResult, Transaction, UserProjection, EXPENSE

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Any failed call: unreachable server, non-2xx status or a malformed body"""

    def __init__(self, message, status_code=None, server_message=None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.server_message = server_message


# ---------------- Helpers ----------------
def safe_json(resp):
    try:
        return resp.json()
    except ValueError:
        return None


def _server_message(payload):
    if isinstance(payload, dict):
        return payload.get("error") or payload.get("message")
    return None


class ExpenseApiClient:
    """Client for the expense backend API.

    One timeout for every call, no retries. Failures always surface as
    ``ApiError`` so pages only need a single except clause.
    """

    def __init__(self, base_url=None, token=None, timeout=None, http=requests):
        self.base_url = (base_url or config.API_BASE).rstrip("/")
        self.token = token
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.http = http

    def _request(self, method, path, json=None, params=None, auth=True):
        headers = {"Content-Type": "application/json"}
        if auth and self.token:
            headers["Authorization"] = f"Bearer {self.token}"
        url = self.base_url + path

        try:
            response = self.http.request(
                method.upper(), url, headers=headers, json=json, params=params, timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"{method.upper()} {path} failed: {e}")
            raise ApiError(f"Connection failed: {e}") from e

        payload = safe_json(response)
        if not 200 <= response.status_code < 300:
            server_message = _server_message(payload)
            logger.error(f"{method.upper()} {path} returned {response.status_code}: {server_message or payload}")
            raise ApiError(
                f"{method.upper()} {path} failed with status {response.status_code}",
                status_code=response.status_code,
                server_message=server_message,
            )
        return payload

    def _list(self, path, record, label, params=None):
        payload = self._request("GET", path, params=params)
        if not isinstance(payload, list):
            raise ApiError(f"Invalid {label} data format")
        try:
            return [record.from_api(item) for item in payload]
        except FormatError as e:
            raise ApiError(f"Invalid {label} data format: {e}") from e

    # ---------------- Authentication ----------------
    def login(self, email, password):
        payload = self._request("POST", "/api/login", json={"email": email, "password": password}, auth=False)
        if not isinstance(payload, dict):
            raise ApiError("Invalid login response")
        user = payload.get("user")
        token = payload.get("token")
        user_id = (user.get("id") or user.get("_id")) if isinstance(user, dict) else None
        if not token or not user_id:
            raise ApiError("Invalid login response")
        return LoginResult(token=token, user_id=str(user_id))

    def signup(self, name, email, password):
        return self._request(
            "POST", "/api/users", json={"name": name, "email": email, "password": password}, auth=False
        )

    # ---------------- Categories ----------------
    def list_categories(self, user_id):
        return self._list(f"/api/categories/{user_id}", Category, "categories")

    def create_category(self, name, budget, user_id):
        payload = self._request(
            "POST", "/api/categories", json={"name": name, "budget": float(budget), "userId": user_id}
        )
        try:
            return Category.from_api(payload)
        except FormatError as e:
            raise ApiError(f"Invalid category data format: {e}") from e

    def update_category_budget(self, category_id, budget, user_id):
        """Returns the server's copy of the category when the response carries one"""
        payload = self._request(
            "PUT", f"/api/categories/{category_id}", json={"budget": float(budget), "userId": user_id}
        )
        if isinstance(payload, dict) and (payload.get("_id") or payload.get("id")) and "budget" in payload:
            try:
                return Category.from_api(payload)
            except FormatError:
                logger.warning(f"Ignoring malformed category in update response: {payload}")
        return None

    # ---------------- Transactions ----------------
    def list_transactions(self, user_id, month, year):
        return self._list(
            f"/api/transactions/{user_id}",
            Transaction,
            "transactions",
            params={"month": str(month), "year": str(year)},
        )

    def create_transaction(self, user_id, amount, tx_type, description, tx_date, category=None):
        payload = {
            "amount": float(amount),
            "type": tx_type,
            "description": description,
            "date": tx_date.isoformat(),
            "user": user_id,
            "month": tx_date.month,
            "year": tx_date.year,
        }
        if tx_type == EXPENSE and category:
            payload["category"] = category
        return self._request("POST", "/api/transactions", json=payload)

    # ---------------- Users ----------------
    def get_user(self, user_id):
        payload = self._request("GET", f"/api/users/id/{user_id}")
        try:
            return UserProjection.from_api(payload)
        except FormatError as e:
            raise ApiError(str(e)) from e
