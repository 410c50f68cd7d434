from fastapi import APIRouter
from portal.routers import auth, jobs, shortlist, resumes, applications, dashboard, notifications

# Centralized API router hub; main.py only imports this one.
api_router = APIRouter()

api_router.include_router(auth.router, tags=["Authentication"])
api_router.include_router(jobs.router, tags=["Jobs"])
api_router.include_router(shortlist.router, tags=["Shortlist"])
api_router.include_router(resumes.router, tags=["Resumes"])
api_router.include_router(applications.router, tags=["Applications"])
api_router.include_router(dashboard.router, tags=["Dashboard"])
api_router.include_router(notifications.router, tags=["Notifications"])
