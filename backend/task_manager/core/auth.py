from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer
from jose import JWTError, jwt
from sqlalchemy.orm import Session

from task_manager.core.config import ALGORITHM, BASE_URL, SECRET_KEY
from task_manager.core.security import verify_password
from task_manager.database.deps import get_db
from task_manager.models.user import User

oauth2_scheme = OAuth2PasswordBearer(tokenUrl=f"{BASE_URL}/login")


def authenticate_user(db: Session, username: str, password: str) -> Optional[User]:
    user = db.query(User).filter(User.email == username).first()
    if not user:
        return None
    if not verify_password(password, user.password_digest):
        return None
    return user


def get_current_user(
    token: str = Depends(oauth2_scheme),
    db: Session = Depends(get_db)
):
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid credentials",
        headers={"WWW-Authenticate": "Bearer"}
    )
    try:
        payload = jwt.decode(token, SECRET_KEY, algorithms=[ALGORITHM])
        username = payload.get("sub")
        if username is None:
            raise credentials_exception
    except JWTError:
        raise credentials_exception

    user = db.query(User).filter(User.email == username).first()
    if not user:
        raise credentials_exception
    return user
