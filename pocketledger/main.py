import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pocketledger.config import FRONTEND_ORIGIN, SEED_DEMO_USER
from pocketledger.db import Base, engine, sessionlocal
from pocketledger import models  # registers tables on Base.metadata
from pocketledger.routers.auth_router import auth_router
from pocketledger.routers.accounts_router import accounts_router
from pocketledger.routers.categories_router import categories_router
from pocketledger.routers.merchants_router import merchants_router
from pocketledger.routers.transactions_router import transactions_router
from pocketledger.routers.summary_router import summary_router
from pocketledger.services.demo_service import seed_demo_user
from pocketledger.utils.logger import get_logger

logger = get_logger("pocketledger")

@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    if SEED_DEMO_USER:
        db = sessionlocal()
        try:
            seed_demo_user(db)
        finally:
            db.close()
    yield

app = FastAPI(title="Pocketledger", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=[FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.middleware("http")
async def log_requests(request: Request, call_next):
    started = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - started) * 1000
    logger.info(f"{request.method} {request.url.path} -> {response.status_code} ({elapsed_ms:.1f} ms)")
    return response

# Error bodies are always {"message": ..., "errors"?: ...}
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    message = exc.detail if isinstance(exc.detail, str) else "Request failed"
    if exc.status_code == 404 and message == "Not Found":
        message = "Not found"
    return JSONResponse(status_code=exc.status_code, content={"message": message}, headers=getattr(exc, "headers", None))

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    field_errors = {}
    for error in exc.errors():
        location = [str(part) for part in error.get("loc", ())[1:]]
        field = ".".join(location) or "_"
        field_errors.setdefault(field, []).append(error.get("msg", "Invalid value"))

    in_body = any(error.get("loc", ("",))[0] == "body" for error in exc.errors())
    message = "Invalid payload" if in_body else "Invalid query"
    return JSONResponse(status_code=400, content={"message": message, "errors": {"fieldErrors": field_errors}})

# Register routers
for router in (auth_router, accounts_router, categories_router, merchants_router, transactions_router, summary_router):
    app.include_router(router, prefix="/api")

if __name__ == "__main__":
    import uvicorn
    from pocketledger.config import PORT

    uvicorn.run("pocketledger.main:app", host="0.0.0.0", port=PORT)
