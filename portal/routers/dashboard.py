from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import require_hr, require_student
from portal.schemas.application import HRDashboard, StudentDashboard
from portal.services.dashboard_service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["Dashboard"])

@router.get("/hr", response_model=HRDashboard)
def hr_dashboard(db: Session = Depends(get_db), current_user: User = Depends(require_hr)):
    return DashboardService(db).hr_summary(current_user)

@router.get("/student", response_model=StudentDashboard)
def student_dashboard(db: Session = Depends(get_db), current_user: User = Depends(require_student)):
    return DashboardService(db).student_summary(current_user)
