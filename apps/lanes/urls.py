from django.urls import path
from . import views

app_name = 'lanes'

urlpatterns = [
    path('lanes/impact', views.LaneImpactView.as_view(), name='impact'),
    path('lanes/<str:lane_id>/state', views.LaneStateView.as_view(), name='state'),
]
