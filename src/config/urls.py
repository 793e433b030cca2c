from django.urls import include, path

urlpatterns = [
    path("", include("trip_planner.urls")),
]
