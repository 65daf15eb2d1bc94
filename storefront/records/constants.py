"""Clés des enregistrements du stockage."""

PRODUCTS_KEY = "products"
ORDERS_KEY = "orders"
ADMIN_KEY = "admin"

RECORD_KEYS = (PRODUCTS_KEY, ORDERS_KEY, ADMIN_KEY)
