# app/main.py
import logging
import time
from contextlib import asynccontextmanager
from logging.handlers import RotatingFileHandler

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.middleware.sessions import SessionMiddleware

from database.config import Settings, get_settings
from exceptions import VetClinicError
from routes import categories, clients, departments, leads, pets, roles, services, system, users, visits

API_PREFIX = "/v1"

# Получаем настройки
settings = get_settings()


def configure_logging(settings: Settings) -> None:
    """Настройка логирования: консоль и, если задан LOG_FILE, файл с ротацией"""
    handlers = [logging.StreamHandler()]
    if settings.LOG_FILE:
        handlers.append(RotatingFileHandler(
            settings.LOG_FILE,
            maxBytes=settings.LOG_MAX_BYTES,
            backupCount=settings.LOG_BACKUP_COUNT,
            encoding="utf-8",
        ))

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers,
    )

    # Отключаем избыточные логи SQLAlchemy, если не включен SQL_ECHO
    if not settings.SQL_ECHO:
        logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)
        logging.getLogger('sqlalchemy.pool').setLevel(logging.WARNING)


configure_logging(settings)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Инициализация БД при запуске"""
    from database.database import engine
    from database.init_db import init_db

    logger.info(f"Starting {settings.APP_NAME}...")
    init_db(engine, drop_all=settings.DB_MIGRATION, master_data=settings.MASTER_GENERATOR)
    yield
    logger.info(f"Stopping {settings.APP_NAME}...")


# Создаем приложение
app = FastAPI(
    lifespan=lifespan,
    title=settings.APP_NAME,
    description=settings.APP_DESCRIPTION,
    version=settings.API_VERSION,
    docs_url=settings.SWAGGER_PATH if settings.SWAGGER_ENABLED else None,
    redoc_url=None,
    openapi_url="/openapi.json" if settings.SWAGGER_ENABLED else None,
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Журнал запросов: адрес клиента, URI, метод и код ответа"""
    started = time.perf_counter()
    logger.debug(f"Action start: {request.method} {request.url.path}")
    response = await call_next(request)
    remote_ip = request.client.host if request.client else "-"
    logger.info(f"{remote_ip} {request.url.path} {request.method} {response.status_code}")
    logger.debug(
        f"Action end: {request.method} {request.url.path} "
        f"({(time.perf_counter() - started) * 1000:.1f} ms)"
    )
    return response


if settings.SECURITY_ENABLED:
    @app.middleware("http")
    async def security_headers(request: Request, call_next):
        response = await call_next(request)
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "SAMEORIGIN"
        return response

# Настройка CORS
if settings.CORS_ENABLED:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.add_middleware(GZipMiddleware)
app.add_middleware(
    SessionMiddleware,
    secret_key=settings.SECRET_KEY,
    session_cookie=settings.SESSION_COOKIE,
    max_age=settings.SESSION_MAX_AGE,
    same_site="lax",
)


@app.exception_handler(VetClinicError)
async def vet_clinic_error_handler(request: Request, exc: VetClinicError):
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": exc.message},
    )


def format_validation_errors(exc: RequestValidationError) -> str:
    """Сводка ошибок проверки: поле, правило и отклоненное значение"""
    messages = []
    for error in exc.errors():
        field = ".".join(str(part) for part in error.get("loc", ())[1:]) or "body"
        message = f"field '{field}': {error.get('msg')}"
        if "input" in error and error["type"] != "missing":
            message += f" (value: {error['input']!r})"
        messages.append(message)
    return "; ".join(messages)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    message = format_validation_errors(exc)
    logger.debug(f"Некорректный запрос {request.url.path}: {message}")
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"message": message},
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    logger.exception(f"Необработанная ошибка {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"message": "Internal Server Error"},
    )


# Подключаем роутеры
for router in (system, roles, users, departments, categories, services, clients, pets, visits, leads):
    app.include_router(router, prefix=API_PREFIX)

if settings.STATIC_ENABLED:
    app.mount("/", StaticFiles(directory=settings.STATIC_DIR, html=True), name="static")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="0.0.0.0", port=8080)
