# Routes package init
"""
Resource API - Routes Package
==============================

Route Inventory:
    - resources.py: GET/PUT/DELETE /resource/{id}, POST /resource, GET /resources
    - general.py:   GET /about, GET /healthcheck

Routes are thin: they take validated input, call ResourceService, and
choose the status code. Business rules live in services/.
"""
