from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import get_current_user
from portal.schemas.notification import NotificationResponse
from portal.services.notification import NotificationService

router = APIRouter(prefix="/notifications", tags=["Notifications"])

@router.get("/", response_model=List[NotificationResponse])
def get_notifications(
    unread_only: bool = False,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return NotificationService.list_for_user(db, current_user.id, unread_only=unread_only)

@router.post("/mark-all-read")
def mark_all_notifications_as_read(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    NotificationService.mark_all_read(db, current_user.id)
    return {"message": "All notifications marked as read"}
