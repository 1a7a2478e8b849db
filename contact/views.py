import logging

from django.conf import settings
from django.http import QueryDict
from django.views.static import serve
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.negotiation import DefaultContentNegotiation
from rest_framework.parsers import FormParser, MultiPartParser
from rest_framework.permissions import AllowAny
from rest_framework.renderers import TemplateHTMLRenderer
from rest_framework.views import APIView

from .appender import get_appender
from .content import load_home_page_data
from .middleware import error_page
from .records import SubmissionRecord
from .rendering import render_page

logger = logging.getLogger("django")


class HTMLContentNegotiation(DefaultContentNegotiation):
    # Pages are HTML whatever the client asks for.
    def select_renderer(self, request, renderers, format_suffix=None):
        return (renderers[0], renderers[0].media_type)


class PageView(APIView):
    authentication_classes = ()
    permission_classes = (AllowAny,)
    parser_classes = (FormParser, MultiPartParser)
    renderer_classes = (TemplateHTMLRenderer,)
    content_negotiation_class = HTMLContentNegotiation

    def http_method_not_allowed(self, request, *args, **kwargs):
        # Methods a page does not handle fall through to the assets directory.
        return serve(request, request.path.lstrip("/"), document_root=settings.ASSETS_DIR)


class IndexView(PageView):
    view_name = "index"

    def get(self, request):
        return render_page(request, self.view_name, load_home_page_data())


class SubmitFormView(PageView):
    view_name = "thankyou"

    def post(self, request):
        try:
            data = request.data
        except (ParseError, UnsupportedMediaType) as e:
            # A body that is not a form is treated as an empty submission.
            logger.warning(f"Unreadable contact submission body: {e}")
            data = QueryDict()

        record = SubmissionRecord.from_form(data)
        logger.info(f"Contact submission received at {record.timestamp}")

        # Not awaited: the thank-you page is shown whatever happens to the write.
        get_appender().append(record)

        return render_page(request, self.view_name)


def server_error(request):
    """handler500 for failures raised outside the views."""
    return error_page(request)
