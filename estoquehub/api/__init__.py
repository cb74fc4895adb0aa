"""
API layer for EstoqueHub.

Exposes the HTTP endpoints: /auth (register, login, me), /products (CRUD,
bearer token required) and the deprecated /tarefas route.
"""
