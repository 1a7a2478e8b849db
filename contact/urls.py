from django.urls import path

from .views import IndexView, SubmitFormView

urlpatterns = [
    path("", IndexView.as_view(), name="index"),
    path("submit-form", SubmitFormView.as_view(), name="submit_form"),
]
