from django.urls import path
from teamhub.views.team import (
    BulkDeleteTeamsView,
    TeamApprovalView,
    TeamDetailView,
    TeamListView,
    TeamReorderView,
)
from teamhub.views.health import HealthView
from teamhub.views.auth import LoginView, LogoutView, MeView, RegisterView

urlpatterns = [
    path("teams", TeamListView.as_view(), name="teams"),
    path("teams/bulk", BulkDeleteTeamsView.as_view(), name="teams_bulk_delete"),
    path("teams/reorder", TeamReorderView.as_view(), name="teams_reorder"),
    path("teams/<str:team_id>", TeamDetailView.as_view(), name="team_detail"),
    path("teams/<str:team_id>/approve", TeamApprovalView.as_view(), name="team_approve"),
    path("health", HealthView.as_view(), name="health"),
    path("auth/register", RegisterView.as_view(), name="register"),
    path("auth/login", LoginView.as_view(), name="login"),
    path("auth/logout", LogoutView.as_view(), name="logout"),
    path("auth/me", MeView.as_view(), name="me"),
]
