# Services package init
"""
Library API — Services Layer
=============================

What:  The two components route handlers talk to: the catalog and the activity log.
How:   Each is an abstract contract with concrete implementations. The app
       factory builds one of each and FastAPI's dependency injection hands
       them to routes (see library_api.dependencies).

Service Inventory:
    - BookService (abstract): {list, get, add, delete} over Book records
    - InMemoryBookService: ordered in-memory list, seeded with two books
    - ActivityLogger (abstract): one timestamped line per catalog access
    - ConsoleActivityLogger / LoggingActivityLogger / RecordingActivityLogger
"""
