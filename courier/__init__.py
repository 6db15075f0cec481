from courier.client import Client, Method
from courier.models import Response, JsonResponse
from courier.headers import HeaderBag
from courier.errors import CourierError, JsonDecodeError

__all__ = [
    "Client",
    "Method",
    "Response",
    "JsonResponse",
    "HeaderBag",
    "CourierError",
    "JsonDecodeError",
]
