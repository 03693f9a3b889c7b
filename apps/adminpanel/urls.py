from django.urls import path
from .views import AdminFreelancerList, AdminFreelancerDetail

urlpatterns = [
    path('admin/freelancers/', AdminFreelancerList.as_view(), name='admin-freelancers'),
    path('admin/freelancers/<int:pk>/', AdminFreelancerDetail.as_view(), name='admin-freelancer-detail'),
]
