# store/__init__.py
"""
Client-side entity stores for branches and courses.

- models: entities, inputs, enums and ActionResult
- entity_store: the shared async CRUD/featured machinery
- branch_store / course_store: endpoints and multipart shapes per entity
- app_state: the per-session container handed to views
"""
