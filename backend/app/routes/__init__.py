"""
Noteful Backend — API Routes Package
======================================

Route Inventory:
    - resources.py: build_resource_router(), mounted once per resource:
                    /api/folders, /api/notes, /api/users, /api/articles
    - health.py:    GET /health (service health check)

Routes are thin: they build a controller for the request and shape the
HTTP response. Validation, sanitization and existence checks live in
app/services/.
"""
