from fastapi import APIRouter
from greenfarm.api.endpoints import contact, newsletter, blogs

api_router = APIRouter(prefix="/api")

api_router.include_router(contact.router, tags=["Contact"])
api_router.include_router(newsletter.router, tags=["Newsletter"])
api_router.include_router(blogs.router, tags=["Blogs"])
