import logging

from fastapi import FastAPI
from doproject.config import LOG_LEVEL
from doproject.exception_handlers import register_exception_handlers
from doproject.routers import user_router, project_router, task_router

logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="doProject API")
register_exception_handlers(app)

app.include_router(user_router.router, prefix="/api", tags=["Users"])
app.include_router(project_router.router, prefix="/api", tags=["Projects"])
app.include_router(task_router.router, prefix="/api", tags=["Tasks"])

# Root health
@app.get("/")
async def read_root():
    return {"status": "ok"}
