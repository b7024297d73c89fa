# Services package init
"""
Bookmarks Backend: Services Layer
=================================

Business logic between routes (HTTP) and the database. Every service is a
stateless class with a module-level singleton; routes receive them through
the providers in `bookmarks.dependencies`, which tests can override.

Service Inventory:
    - BookmarkService: listing, CRUD and per-category order maintenance
    - CategoryService: category display sequence (full replace)
    - SettingsService: theme / site title / site icon
    - AuthService: admin credential check, token issue and verify
"""
