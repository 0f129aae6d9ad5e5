import logging
import sys

from app.core.config import settings

def configure_logging():
    logging.basicConfig(
        level=settings.LOG_LEVEL.upper(),
        format='%(asctime)s | %(levelname)s | %(name)s | %(funcName)s:%(lineno)d | %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=[
            logging.StreamHandler(sys.stdout)
        ]
    )

    logging.getLogger("uvicorn.error").propagate = True
    
    logging.getLogger("uvicorn.access").disabled = True 

    logging.getLogger("redis").setLevel(logging.WARNING)

    return logging.getLogger("app")
