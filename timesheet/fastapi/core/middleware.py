import logging

from fastapi.middleware.cors import CORSMiddleware

logger = logging.getLogger(__name__)


def setup_cors(app, settings):
    origins = settings.cors_origins or ["*"]

    if "*" in origins:
        origins = ["*"]
        allow_credentials = False  # Can't use credentials with wildcard origins
    else:
        allow_credentials = True

    logger.info("CORS allowed origins: %s", origins)

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=allow_credentials,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
    )
