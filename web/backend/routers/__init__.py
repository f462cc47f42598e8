"""API route handlers."""

from .opportunities import router as opportunities_router
from .organizations import router as organizations_router
from .volunteers import router as volunteers_router
