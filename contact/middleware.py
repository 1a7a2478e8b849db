import logging

from django.http import Http404, HttpResponseServerError

from .rendering import render_page

logger = logging.getLogger("django")


def error_page(request):
    try:
        return render_page(request, "error", status=500)
    except Exception:
        logger.error("Error page could not be rendered", exc_info=True)
        return HttpResponseServerError(
            "Internal Server Error", content_type="text/plain; charset=utf-8"
        )


class ErrorPageMiddleware:
    """Turns any exception raised while handling a request into the 500 error page."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        return self.get_response(request)

    def process_exception(self, request, exception):
        # Unmatched paths keep the framework's 404.
        if isinstance(exception, Http404):
            return None
        logger.error(
            f"Unhandled error on {request.method} {request.path}: {exception}",
            exc_info=exception,
        )
        return error_page(request)
