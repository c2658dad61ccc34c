# py
from fastapi import FastAPI
import uvicorn
from bmicalc.core.config import get_settings
from bmicalc.core.logging import configure_logging
from bmicalc.middleware import register_middleware
from bmicalc.api.router import api_router
from fastapi.responses import JSONResponse

settings = get_settings()
configure_logging(settings.LOG_LEVEL)

app = FastAPI(title=settings.SERVICE_NAME, version=settings.SERVICE_VERSION)
register_middleware(app)

app.include_router(api_router, prefix="/api")

@app.get("/health", response_class=JSONResponse)
async def health_check():
    return {"status": "ok", "service": settings.SERVICE_NAME, "version": settings.SERVICE_VERSION}

if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=int(settings.PORT), log_level=settings.LOG_LEVEL.lower())
