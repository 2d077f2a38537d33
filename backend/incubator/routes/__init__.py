# Routes package init
"""
Incubator Backend — API Routes Package
========================================

Route Inventory (all under the API prefix, default /api, except health):
    - resources.py: generic route family, built per ResourceService
    - events.py:    event family + /event/public/upcoming
    - mentors.py:   mentor family + /mentor/{id}/status
    - admin.py:     /admin account management
    - auth.py:      /auth/login, /auth/me
    - health.py:    GET /health, GET /

Routes stay thin: they parse the request, call a service and wrap the result
in the response envelope. Access checks are declared as dependencies.
"""
