import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from smunch import db
from smunch.controllers import payment_router
from smunch.errors import SmunchError

# ============================================================
# 📝 LOGGING
# ============================================================
logging.basicConfig(
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    level=logging.INFO,
)
log = logging.getLogger("server")


# ============================================================
# 🚀 APP INIT
# ============================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    await db.init_db()
    yield
    await db.close_db()


app = FastAPI(title="SMUNCH Payments API", lifespan=lifespan)
app.include_router(payment_router)


# ============================================================
# ❌ ERROR HANDLERS
# ============================================================
@app.exception_handler(SmunchError)
async def smunch_error_handler(request: Request, exc: SmunchError):
    log.info(f"{request.method} {request.url.path} -> {exc.status_code} {exc.code}")
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"message": "Internal server error", "code": "INTERNAL_ERROR"},
    )


# ============================================================
# ❤️ HEALTH CHECK
# ============================================================
@app.get("/health")
async def health():
    return {"ok": True}
