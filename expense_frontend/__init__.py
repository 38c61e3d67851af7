# expense_frontend/__init__.py
