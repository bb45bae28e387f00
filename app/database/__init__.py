# app/database/__init__.py
