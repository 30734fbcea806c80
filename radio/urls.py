from django.urls import path, include
from . import views
from .api.views import AccountsAPIView

urlpatterns = [
    path("", views.player, name="player"),
    path("users", AccountsAPIView.as_view(), name="users"),

    # JSON API used by the player
    path("api/", include("radio.api.urls")),
]
