# Routes package init
"""
Mock Location API — API Routes Package
========================================

Route Inventory:
    - locations.py:  GET /locations      (paginated mock records)
    - exercise.py:   GET /markdown       (exercise brief, Markdown)
                     GET /requirement    (exercise brief, HTML viewer)
    - health.py:     GET /health         (service health check)

Routes stay thin: parse the request, call the service, set headers.
"""
