import logging

from fastapi import FastAPI

from folio.routers import posts, subscribe
from folio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Folio API", description="Blog posts, series and newsletter")

app.include_router(posts.router)
app.include_router(subscribe.router)

logger.info(f"Serving content from {settings.content_path.resolve()}")


@app.get("/")
async def root():
    return {"message": "Folio API is running"}
