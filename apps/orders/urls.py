from django.urls import path
from . import views

urlpatterns = [
    # client
    path('client/orders/', views.ClientOrderListCreateView.as_view(), name='client-orders'),
    path('client/orders/active/', views.ActiveOrderView.as_view(), name='client-orders-active'),
    path('client/orders/<int:pk>/', views.ClientOrderDetailView.as_view(), name='client-order-detail'),
    path('client/orders/<int:pk>/pay/', views.OrderPaymentView.as_view(), name='client-order-pay'),
    path('client/orders/<int:pk>/requirements/', views.OrderRequirementsView.as_view(), name='client-order-requirements'),

    # freelancer
    path('freelancer/orders/', views.FreelancerOrderListView.as_view(), name='freelancer-orders'),
    path('freelancer/orders/<int:pk>/', views.FreelancerOrderDetailView.as_view(), name='freelancer-order-detail'),
    path('freelancer/orders/<int:pk>/delivery/', views.FreelancerOrderDeliveryView.as_view(), name='freelancer-order-delivery'),
]
