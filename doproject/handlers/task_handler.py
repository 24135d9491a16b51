from fastapi import FastAPI
from mangum import Mangum
from doproject.exception_handlers import register_exception_handlers
from doproject.routers.task_router import router as task_router

app = FastAPI(title="Task Lambda")
register_exception_handlers(app)
app.include_router(task_router, prefix="/api")

handler = Mangum(app)
