"""API router package.

Most code should import the composed router via:

    from services.phonebook.app.routes import router

The actual composition lives in `routes/api_router.py`.
"""

from .api_router import router
