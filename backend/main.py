from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from config import settings
from routes import health_router, verify_router
from routes.verify import missing_fields_response
from services import EmailService, build_transport


@asynccontextmanager
async def lifespan(app: FastAPI):
    transport = build_transport(settings)
    app.state.email_service = EmailService(transport, settings)

    print(f"""
+======================================================+
|                                                      |
|   APULA MAILER                                       |
|   v{settings.VERSION:<50}|
|                                                      |
|   Environment: {settings.ENVIRONMENT:<38}|
|   Transport:   {transport.name:<38}|
|                                                      |
+======================================================+
    """)
    if transport.name == "smtp" and not settings.EMAIL_USER:
        print("[Mailer] WARNING: EMAIL_USER is not set, sends will fail")
    print(f"[Mailer] Server running on http://{settings.HOST}:{settings.PORT}")

    yield

    await transport.close()
    print("\n[Mailer] Shutdown.\n")


app = FastAPI(
    title="Apula Mailer API",
    version=settings.VERSION,
    docs_url="/docs" if settings.DEBUG else None,
    redoc_url=None,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    return missing_fields_response()


@app.exception_handler(Exception)
async def error_handler(request: Request, exc: Exception):
    print(f"[ERROR] {type(exc).__name__}: {exc}")
    return JSONResponse(status_code=500, content={"error": "Internal error"})


app.include_router(health_router)
app.include_router(verify_router)


@app.get("/")
async def root():
    return {"name": settings.APP_NAME, "version": settings.VERSION, "status": "ok"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host=settings.HOST, port=settings.PORT)
