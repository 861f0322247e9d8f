import uvicorn

from multilingua.config import settings
from multilingua.main import create_app
from multilingua.middleware.logging import configure_logging

configure_logging(settings.log_level, json_output=settings.log_json)
app = create_app()


if __name__ == "__main__":
    uvicorn.run("main:app", host="0.0.0.0", port=8000, reload=settings.debug)
