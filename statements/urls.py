from django.urls import path

from statements.handlers import StatementView

urlpatterns = [
    path("statements", StatementView.as_view(), name="statement-create"),
]
