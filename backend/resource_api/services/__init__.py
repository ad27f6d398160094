# Services package init
"""
Resource API - Services Layer
==============================

What:  Business logic between routes (HTTP) and the record store (persistence).

Service Inventory:
    - ResourceService: get / create / partial update / soft delete / list
"""
