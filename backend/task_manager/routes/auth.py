from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from task_manager.core.auth import authenticate_user
from task_manager.core.config import BASE_URL
from task_manager.core.security import create_access_token
from task_manager.database.deps import get_db
from task_manager.schemas.user import LoginRequest

router = APIRouter(prefix=BASE_URL, tags=["Auth"])


@router.post("/login", response_class=PlainTextResponse)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    user = authenticate_user(db, credentials.username.strip(), credentials.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect username or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return create_access_token({"sub": user.email})
