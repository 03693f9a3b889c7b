from rest_framework import status
from rest_framework.exceptions import APIException


class InvalidOrderState(APIException):
    """
    The order is not in a state that allows the requested change.
    """
    status_code = status.HTTP_409_CONFLICT
    default_detail = "Order is not in a valid state for this action."
    default_code = "invalid_order_state"
