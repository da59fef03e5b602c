from typing import Annotated, Optional
from fastapi import Depends, Header, HTTPException, Path

from pocketledger.db import get_db
from pocketledger.schemas.finance_schemas import MAX_ID
from pocketledger.utils.security import decode_access_token

def get_current_user_id(authorization: Optional[str] = Header(None)) -> int:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Unauthorized")

    token = authorization[len("Bearer "):].strip()
    user_id = decode_access_token(token)
    if user_id is None:
        raise HTTPException(status_code=401, detail="Invalid token")
    return user_id

DbSession = Depends(get_db)
CurrentUser = Depends(get_current_user_id)

PathId = Annotated[int, Path(ge=1, le=MAX_ID)]
