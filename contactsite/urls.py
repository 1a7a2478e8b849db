from django.conf import settings
from django.urls import include, path, re_path
from django.views.static import serve

urlpatterns = [
    path("", include("contact.urls")),
    # Anything the site does not route is looked up in the assets directory.
    re_path(
        r"^(?P<path>.+)$",
        serve,
        {"document_root": settings.ASSETS_DIR},
        name="assets",
    ),
]

handler500 = "contact.views.server_error"
