# storefront/main.py
import uvicorn

from storefront.api import create_app
from storefront.data.database import Base, engine
from storefront.utils.logging import get_logger

# import all models before create_all
from storefront.data import models  # noqa: F401

logger = get_logger(__name__)


def init_db():
    logger.info(f"Initializing database, tables: {list(Base.metadata.tables.keys())}")
    try:
        Base.metadata.create_all(bind=engine)
        logger.info("Database tables created")
    except Exception as e:
        logger.error(f"Failed to create tables: {e}")
        raise


init_db()

app = create_app()

if __name__ == "__main__":
    uvicorn.run(app, host="0.0.0.0", port=8000)
