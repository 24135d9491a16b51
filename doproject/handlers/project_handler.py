from fastapi import FastAPI
from mangum import Mangum
from doproject.exception_handlers import register_exception_handlers
from doproject.routers.project_router import router as project_router

app = FastAPI(title="Project Lambda")
register_exception_handlers(app)
app.include_router(project_router, prefix="/api")

handler = Mangum(app)
