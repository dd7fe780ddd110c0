import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from findjob.core.config import settings
from findjob.core.database import init_db
from findjob.core.errors import register_exception_handlers
from findjob.routers import (
    auth_router, user_router, company_router,
    opportunity_router, application_router, cv_router,
    message_router, notification_router, saved_router,
    stats_router, recommendation_router
)

# --- 匯入所有 Model 檔案 ---
# 都在應用程式啟動時被 SQLAlchemy 註冊。
from findjob.models import user
from findjob.models import company
from findjob.models import opportunity
from findjob.models import cv
from findjob.models import application
from findjob.models import message
from findjob.models import notification
from findjob.models import saved_opportunity


# 設定基礎日誌
logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(name)s - %(levelname)s - %(message)s')
logger = logging.getLogger(__name__) # 建立一個 logger 實例

@asynccontextmanager
async def lifespan(app: FastAPI):
    # 建立尚未存在的資料表
    await init_db()
    logger.info("Database ready")
    yield

app = FastAPI(title="Find Job Syria API", lifespan=lifespan)

# --- 設定 CORS (跨來源資源共用) ---
# Session cookie 需要 allow_credentials
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"], # 允許所有 HTTP 方法
    allow_headers=["*"], # 允許所有 HTTP 標頭
)

register_exception_handlers(app)

# --- 根路徑 ---
@app.get("/")
def read_root():
    return {"status": "success", "message": "Backend is running!"}

# --- 載入 API 路由 ---
app.include_router(auth_router.router)
app.include_router(user_router.router)
app.include_router(company_router.router)
app.include_router(opportunity_router.router)
app.include_router(application_router.router)
app.include_router(cv_router.router)
app.include_router(message_router.router)
app.include_router(notification_router.router)
app.include_router(saved_router.router)
app.include_router(stats_router.router)
app.include_router(recommendation_router.router)
