from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portal.database import get_db
from portal.models.user import User
from portal.routers.auth_deps import get_current_user
from portal.schemas.auth import LoginRequest, RegisterRequest, Token, UserResponse
from portal.services.auth import AuthService

router = APIRouter(
    prefix="/auth",
    tags=["auth"]
)

@router.post("/register", response_model=Token, status_code=201)
def register(data: RegisterRequest, db: Session = Depends(get_db)):
    user = AuthService(db).register(name=data.name, email=data.email, role=data.role)
    return {"access_token": AuthService.issue_token(user), "token_type": "bearer", "user": user}

@router.post("/login", response_model=Token)
def login(data: LoginRequest, db: Session = Depends(get_db)):
    # Password is deliberately ignored; a login is an (email, role) lookup
    user = AuthService(db).login(email=data.email, role=data.role)
    return {"access_token": AuthService.issue_token(user), "token_type": "bearer", "user": user}

@router.post("/logout")
def logout():
    """Sessions are stateless; the client drops its token."""
    return {"message": "Successfully logged out"}

@router.get("/me", response_model=UserResponse)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
