# expense_frontend/views/__init__.py
