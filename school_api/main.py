# /school_api/main.py
import logging
import os
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

# --- Core / Config ---
from school_api.core.config import settings
from school_api.core.exceptions import ImageUploadError, ImageTooLargeError

# --- Database ---
from school_api.db.session import Database
from school_api.db.init_db import ensure_schema

# --- API Routers ---
from school_api.api.routes import school as school_router

# --- 미들웨어 import ---
from fastapi.middleware.cors import CORSMiddleware


logging.basicConfig(
    level=logging.INFO, # INFO 레벨 이상의 로그를 모두 출력하도록 설정
    format="%(asctime)s - %(levelname)s - %(message)s", # 로그 형식 지정
    force=True # 다른 라이브러리에 의해 이미 설정되었더라도 강제로 재설정
)


# --- Lifespan (애플리케이션 시작/종료 이벤트) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    # 커넥션 풀을 가진 DB 클라이언트 생성 후 라우트에서 get_db로 주입
    database = Database(
        settings.DATABASE_URL,
        pool_size=settings.DB_POOL_SIZE,
        pool_timeout=settings.DB_POOL_TIMEOUT,
        echo=settings.SQL_ECHO,
    )
    ensure_schema(database) # 실패해도 서버는 계속 실행
    os.makedirs(settings.UPLOAD_DIR, exist_ok=True)
    app.state.database = database

    yield

    logging.info("Shutting down gracefully...")
    database.dispose()

# --- FastAPI App Instance ---
app = FastAPI(
    title="School Records API",
    lifespan=lifespan
)

@app.middleware("http")
async def add_process_time_header(request: Request, call_next):
    start_time = time.time()

    response = await call_next(request)

    process_time = time.time() - start_time
    response.headers["X-Process-Time"] = str(process_time)

    logging.info(
        f"Request processed: {request.method} {request.url.path} - {response.status_code} in {process_time:.4f} secs"
    )

    return response


# --- CORS 미들웨어 설정 ---
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- 에러 핸들러 ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    content = exc.detail if isinstance(exc.detail, dict) else {"message": exc.detail}
    return JSONResponse(status_code=exc.status_code, content=content, headers=exc.headers)

@app.exception_handler(ImageTooLargeError)
async def image_too_large_handler(request: Request, exc: ImageTooLargeError):
    return JSONResponse(status_code=400, content={"message": "File too large"})

@app.exception_handler(ImageUploadError)
async def image_upload_error_handler(request: Request, exc: ImageUploadError):
    return JSONResponse(status_code=400, content={"message": exc.message})

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=400,
        content={"message": "Invalid request", "errors": jsonable_encoder(exc.errors())}
    )

@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logging.exception(f"Unhandled error on {request.method} {request.url.path}")
    return JSONResponse(status_code=500, content={"message": str(exc)})


# --- 정적 파일 (업로드 이미지) ---
app.mount("/uploads", StaticFiles(directory=settings.UPLOAD_ROOT, check_dir=False), name="uploads")


@app.get("/helth", response_class=PlainTextResponse, include_in_schema=False)
def health_check():
    return "Running..."


# --- 라우트 등록 ---
app.include_router(
    school_router.router,
    prefix="/api",
    tags=["schools"]
)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
