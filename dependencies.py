import logging

from fastapi import HTTPException, Request
from jose import JWTError, jwt

import config

log = logging.getLogger(__name__)


# Token Auth Dependency
def verify_token(request: Request):
    auth = request.headers.get("Authorization")
    if not auth or not auth.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Missing token")
    token = auth.split(" ")[1]
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
        return payload
    except JWTError as e:
        log.warning("Rejected token: %s", e)
        raise HTTPException(status_code=403, detail="Invalid token")
