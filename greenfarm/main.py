#run it with uvicorn greenfarm.main:app --reload
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from dotenv import load_dotenv
import httpx
import logging

# Load environment variables from .env file
load_dotenv()

from greenfarm.api.api_router import api_router
from greenfarm.core.config import get_settings
from greenfarm.core.exceptions import RelayError

# Set up logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Open one outbound HTTP client for the backend relays and close it on shutdown"""
    app.state.http_client = httpx.AsyncClient(timeout=settings.http_timeout)
    logger.info("🚀 Outbound HTTP client ready")
    if not settings.mail_configured:
        logger.warning("⚠️ Mail credentials incomplete - contact form requests will fail until EMAIL_USER, EMAIL_PASS and EMAIL_TO are set")
    if not settings.api_base_url:
        logger.warning("⚠️ API_BASE_URL not set - blog and newsletter requests will fail")
    try:
        yield
    finally:
        await app.state.http_client.aclose()
        logger.info("Outbound HTTP client closed")


app = FastAPI(title="GreenFarm Website Backend", version="1.0.0", lifespan=lifespan)

# CORS setup (set ALLOWED_ORIGINS to the site domain in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_router)


@app.exception_handler(RelayError)
async def relay_error_handler(request: Request, exc: RelayError):
    """Render domain errors as {"error": ...} with the error's status"""
    return JSONResponse(exc.to_response(), status_code=exc.status_code)


@app.get("/api/health")
def health_check():
    """
    Health check endpoint.

    Reports which configuration items are present, never their values.
    """
    current = get_settings()
    return {
        "status": "ok",
        "env_vars": {
            "email_user": bool(current.email_user),
            "email_pass": bool(current.email_pass),
            "email_to": bool(current.email_to),
            "api_base_url": bool(current.api_base_url),
        },
    }
