"""
Items API — Routes Package
===========================

Route Inventory:
    - health.py:  GET    /health               (fixed liveness payload)
    - items.py:   GET    /api/items            (list all items)
                  GET    /api/items/{id}       (single item)
                  POST   /api/items            (create)
                  PUT    /api/items/{id}       (shallow merge update)
                  DELETE /api/items/{id}       (delete, always 204)

Routes stay thin: they pull the store from the app through a dependency,
call it, and translate a missing record into NotFoundError.
"""
