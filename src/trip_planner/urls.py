from django.urls import path

from trip_planner import views

urlpatterns = [
    path("", views.trip_map_view, name="trip-map"),
    path("api/v1/health", views.health_view, name="health"),
    path("api/v1/route", views.route_view, name="route"),
    path("api/v1/place-name", views.place_name_view, name="place-name"),
    path("api/v1/estimate", views.estimate_view, name="estimate"),
    path("api/v1/trip", views.trip_view, name="trip"),
]
