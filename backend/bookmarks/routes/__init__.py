# Routes package init
"""
Bookmarks Backend: API Routes Package
=====================================

Route Inventory:
    - bookmarks.py:   GET/POST /api/bookmarks, PUT/DELETE /api/bookmarks/{id},
                      POST /api/bookmarks/reorder
    - categories.py:  GET/PUT /api/categories/order
    - settings.py:    GET/PUT /api/settings
    - auth.py:        POST /api/auth/login, GET /api/auth/verify
    - health.py:      GET /health

Routes handle HTTP concerns only (auth dependency, status code, headers);
ordering and validation rules live in the services.
"""
