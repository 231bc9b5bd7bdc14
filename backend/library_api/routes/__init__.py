# Routes package init
"""
Library API — API Routes Package
=================================

Route Inventory:
    - books.py:   GET    /api/books          (list catalog)
                  GET    /api/books/{id}     (get one book)
                  POST   /api/books          (add a book)
                  DELETE /api/books/{id}     (delete a book)
    - health.py:  GET    /health             (liveness probe)

Routes stay THIN: pull inputs from the request, call the injected service,
log the access, and pick the status code. Catalog rules live in services.
"""
