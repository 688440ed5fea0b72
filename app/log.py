import logging

from flask import request


LOG_FORMAT = "[%(levelname)s] %(asctime)s - %(name)s - %(message)s"


def configure_logging(app):
    level = logging.getLevelName(app.config.get("LOG_LEVEL", "INFO"))
    if not isinstance(level, int):
        level = logging.INFO

    log = logging.getLogger("app")
    log.setLevel(level)

    if not any(getattr(h, "_app_handler", False) for h in log.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._app_handler = True
        log.addHandler(handler)

    app.logger.setLevel(level)

    if app.config.get("LOG_REQUESTS"):
        request_log = logging.getLogger("app.requests")

        @app.after_request
        def _log_request(response):
            request_log.info(
                "%s %s -> %s", request.method, request.path, response.status_code
            )
            return response

    return log
