# server/api/auth.py

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt
from pydantic import BaseModel
from passlib.context import CryptContext
from fastapi import APIRouter, HTTPException, Request, status, Depends
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from database import get_db
from models.user import User as UserModel


logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["auth"])
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

INVALID_CREDENTIALS = "Invalid username or password"


class Credentials(BaseModel):
    username: str = ""
    password: str = ""


class Token(BaseModel):
    token: str
    token_type: str = "bearer"


class User(BaseModel):
    id: int
    username: str


@dataclass(frozen=True)
class AuthContext:
    """Identity of the caller, resolved from the bearer token of one request."""
    user_id: int
    username: str


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    return pwd_context.hash(password)


def authenticate_user(db: Session, username: str, password: str):
    user = db.query(UserModel).filter(UserModel.username == username).first()
    if not user or not verify_password(password, user.hashed_password):
        return None
    return user


def create_access_token(data: dict, config, expires_delta: timedelta | None = None) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + (
        expires_delta or timedelta(days=config.ACCESS_TOKEN_EXPIRE_DAYS)
    )
    to_encode.update({"exp": expire})
    return jwt.encode(to_encode, config.SECRET_KEY, algorithm=config.ALGORITHM)


def decode_access_token(token: str, config) -> int:
    """
    Returns the user id carried by `token`.
    Raises JWTError if the token is malformed, badly signed or expired.
    """
    payload = jwt.decode(token, config.SECRET_KEY, algorithms=[config.ALGORITHM])
    subject = payload.get("sub")
    if subject is None:
        raise JWTError("token has no subject")
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise JWTError("token subject is not a user id")


oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/signin", auto_error=False)


def get_current_user(
    request: Request,
    token: str | None = Depends(oauth2_scheme),
    db: Session = Depends(get_db),
) -> AuthContext:
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )

    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Invalid token",
        headers={"WWW-Authenticate": "Bearer"},
    )
    try:
        user_id = decode_access_token(token, request.app.state.config)
    except JWTError:
        raise credentials_exception

    user = db.get(UserModel, user_id)
    if user is None:
        raise credentials_exception
    return AuthContext(user_id=user.id, username=user.username)


@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(request: Request, credentials: Credentials, db: Session = Depends(get_db)):
    config = request.app.state.config
    username = credentials.username.strip()
    password = credentials.password

    if not username or not password:
        raise HTTPException(status_code=400, detail="Username and password are required")
    if len(password) < config.MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"Password must be at least {config.MIN_PASSWORD_LENGTH} characters"
        )

    user_exists = db.query(UserModel).filter(UserModel.username == username).first()
    if user_exists:
        raise HTTPException(status_code=409, detail="Username already exists")

    new_user = UserModel(username=username, hashed_password=get_password_hash(password))
    db.add(new_user)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Username already exists")
    logger.info("Created user %s", username)
    return {"message": "User created successfully"}


@router.post("/signin", response_model=Token)
def signin(request: Request, credentials: Credentials, db: Session = Depends(get_db)):
    username = credentials.username.strip()
    if not username or not credentials.password:
        raise HTTPException(status_code=400, detail="Username and password are required")

    user = authenticate_user(db, username, credentials.password)
    if not user:
        logger.warning("Failed sign-in for %s", username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_CREDENTIALS
        )

    token = create_access_token({"sub": str(user.id)}, request.app.state.config)
    return {"token": token, "token_type": "bearer"}


@router.get("/me", response_model=User)
def read_users_me(current_user: AuthContext = Depends(get_current_user)):
    return {"id": current_user.user_id, "username": current_user.username}
