"""Application entry point for the NutriSnap Nutrition API.

Defines the FastAPI app, middleware and exception handlers, and includes the
API routers from the `api` package. The `lifespan` handler loads the food
catalogue before serving requests.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from core.config import CORS_ALLOW_ORIGINS
from core.error_handlers import register_exception_handlers
from core.logger import get_logger
from services.food_database import food_database

logger = get_logger("main")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Fastapi lifespan context: make sure the catalogue is loaded."""
    logger.info("Food catalogue ready with %s items", len(food_database))
    yield


app = FastAPI(title="NutriSnap Nutrition API", version="1.0.0", lifespan=lifespan)


app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


from api.nutrition import router as nutrition_router
from api.foods import router as foods_router
from api.intake import router as intake_router
from api.recommendations import router as recommendations_router

# Register exception handlers
register_exception_handlers(app)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log incoming requests and their responses."""
    logger.info("%s %s", request.method, request.url.path)
    try:
        response = await call_next(request)
        logger.info("%s %s -> %s", request.method, request.url.path, response.status_code)
        return response
    except Exception:
        logger.exception("Request error: %s %s", request.method, request.url.path)
        raise


@app.get("/health")
def health():
    """Return basic health status and the catalogue size."""
    return {"status": "healthy", "foods": len(food_database)}


# include routers
app.include_router(nutrition_router)
app.include_router(foods_router)
app.include_router(intake_router)
app.include_router(recommendations_router)


if __name__ == "__main__":
    # Allow starting the app via `python ./main.py`
    try:
        import uvicorn
    except ImportError as exc:
        raise RuntimeError("uvicorn is required to run the app. Install with `pip install uvicorn[standard]`. Error: %s" % exc)

    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=True)
