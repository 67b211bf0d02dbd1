"""Dogs API package.

Import ``dogs_api.application.create_app`` to build an app, or serve
``dogs_api.main:app`` with uvicorn.
"""

__all__: list[str] = []
