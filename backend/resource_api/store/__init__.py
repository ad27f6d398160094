"""
Resource API - Record Store Package
====================================

What:  Persistence mapping between the Resource entity and the database.
Why:   Services never build SQL themselves; they call the store operations
       (find_active_by_id, insert, save, list_active).
"""
