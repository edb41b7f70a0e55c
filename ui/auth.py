import secrets

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBasic, HTTPBasicCredentials

basic_security = HTTPBasic()

# Set by app.py from ApiConfig
_credentials = ("admin", "admin123")


def configure(username, password):
    global _credentials
    _credentials = (username, password)


def verify_basic_auth(credentials: HTTPBasicCredentials = Depends(basic_security)):
    username, password = _credentials
    correct_username = secrets.compare_digest(credentials.username.encode(), username.encode())
    correct_password = secrets.compare_digest(credentials.password.encode(), password.encode())
    if not (correct_username and correct_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Basic"},
        )
    return credentials.username
