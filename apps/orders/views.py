import logging

from django_filters.rest_framework import DjangoFilterBackend
from rest_framework import generics, status
from rest_framework.exceptions import ValidationError
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.users.permissions import IsClient, IsFreelancer
from . import services
from .filters import OrderFilter, FreelancerOrderFilter
from .selectors import OrderAccessSelector, ActiveOrderSelector
from .serializers import (
    OrderCreateSerializer,
    OrderSerializer,
    OrderSummarySerializer,
    SubmitAnswersSerializer,
    OrderActionSerializer,
    DeliverySerializer,
)

logger = logging.getLogger(__name__)


# ===========================
# Client
# ===========================
class ClientOrderListCreateView(generics.ListCreateAPIView):
    """
    GET  -> caller's orders, newest first (?status=)
    POST -> create an order; guests must send client_email
    """
    filter_backends = [DjangoFilterBackend]
    filterset_class = OrderFilter

    def get_permissions(self):
        if self.request.method == "POST":
            return [AllowAny()]
        return [IsClient()]

    def get_serializer_class(self):
        if self.request.method == "POST":
            return OrderCreateSerializer
        return OrderSummarySerializer

    def get_queryset(self):
        return OrderAccessSelector.for_client(self.request.user)

    def create(self, request, *args, **kwargs):
        serializer = OrderCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        order = services.create_order(
            actor=request.user,
            freelancer_id=data["freelancer_id"],
            plan_type=data["plan_type"],
            client_email=data.get("client_email") or None,
        )
        return Response(
            {
                "success": True,
                "order": {
                    "id": order.id,
                    "order_number": order.order_number,
                    "price": order.price,
                    "plan_type": order.plan_type,
                    "payment_status": order.payment_status,
                    "project_status": order.project_status,
                },
            },
            status=status.HTTP_201_CREATED,
        )


class ClientOrderDetailView(generics.RetrieveAPIView):
    """
    Order incl. questionnaire snapshot and answers.
    Guest orders are readable by anyone holding the id, like pay and requirements.
    """
    serializer_class = OrderSerializer
    permission_classes = [AllowAny]

    def get_queryset(self):
        return OrderAccessSelector.visible_to_client(self.request.user)


class OrderPaymentView(APIView):
    """
    Demo payment: flips payment_status to "paid".
    """
    permission_classes = [AllowAny]

    def post(self, request, pk):
        order, already_paid = services.capture_payment(actor=request.user, order_id=pk)
        return Response(
            {
                "success": True,
                "message": "Already paid" if already_paid else "Payment captured",
                "payment_status": order.payment_status,
            },
            status=status.HTTP_200_OK,
        )


class OrderRequirementsView(APIView):
    permission_classes = [AllowAny]

    def post(self, request, pk):
        serializer = SubmitAnswersSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.submit_requirement_answers(
            actor=request.user,
            order_id=pk,
            answers=serializer.validated_data["answers"],
        )
        return Response(
            {
                "success": True,
                "message": "Requirements submitted",
                "requirement_answers": order.requirement_answers,
            },
            status=status.HTTP_200_OK,
        )


class ActiveOrderView(APIView):
    permission_classes = [IsClient]

    def get(self, request):
        freelancer_id = request.query_params.get("freelancerId", "").strip()
        if not freelancer_id:
            raise ValidationError({"freelancerId": "freelancerId is required"})
        if not freelancer_id.isdigit():
            raise ValidationError({"freelancerId": "freelancerId must be a number"})

        order = ActiveOrderSelector.between(request.user, int(freelancer_id))
        if order is None:
            return Response({"success": True, "active": False, "order": None})

        return Response({
            "success": True,
            "active": True,
            "order": OrderSummarySerializer(order).data,
        })


# ===========================
# Freelancer
# ===========================
class FreelancerOrderListView(generics.ListAPIView):
    """
    GET ?status=&q= (q matches client email, order number, plan type)
    """
    serializer_class = OrderSummarySerializer
    permission_classes = [IsFreelancer]
    filter_backends = [DjangoFilterBackend]
    filterset_class = FreelancerOrderFilter

    def get_queryset(self):
        return OrderAccessSelector.for_freelancer(self.request.user)


class FreelancerOrderDetailView(generics.RetrieveAPIView):
    """
    GET   -> order incl. questionnaire snapshot and answers
    PATCH -> {"action": "accept" | "reject" | "deliver", "reason"?}
    """
    serializer_class = OrderSerializer
    permission_classes = [IsFreelancer]

    MESSAGES = {
        "accept": "Order accepted",
        "reject": "Order rejected",
        "deliver": "Delivered",
    }

    def get_queryset(self):
        return OrderAccessSelector.for_freelancer(self.request.user)

    def patch(self, request, pk):
        serializer = OrderActionSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        action = serializer.validated_data["action"]

        order = services.transition_order(
            actor=request.user,
            order_id=pk,
            action=action,
            reason=serializer.validated_data.get("reason"),
        )
        return Response({
            "success": True,
            "message": self.MESSAGES[action],
            "order": OrderSerializer(order).data,
        })


class FreelancerOrderDeliveryView(APIView):
    permission_classes = [IsFreelancer]

    def post(self, request, pk):
        serializer = DeliverySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        order = services.deliver_order(
            actor=request.user,
            order_id=pk,
            message=serializer.validated_data.get("message", ""),
            files=serializer.validated_data.get("files", []),
        )
        return Response({
            "success": True,
            "message": "Delivered",
            "order": OrderSerializer(order).data,
        })
