from django.urls import path
from . import views

urlpatterns = [
    path('freelancer/profile/', views.FreelancerProfileView.as_view(), name='freelancer-profile'),

    path('client/freelancers/', views.FreelancerBrowseView.as_view(), name='freelancer-browse'),
    path('client/freelancers/<int:user_id>/', views.FreelancerPublicDetailView.as_view(), name='freelancer-public-detail'),
]
