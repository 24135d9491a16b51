from fastapi import FastAPI
from mangum import Mangum
from doproject.exception_handlers import register_exception_handlers
from doproject.routers.user_router import router as user_router

app = FastAPI(title="User Lambda")
register_exception_handlers(app)
app.include_router(user_router, prefix="/api")

handler = Mangum(app)
