"""
DRF exception handler for the radio API

Every client error leaves the API as {"error": "..."}; bodies that are not
JSON, or not parseable, are a 400 like any other bad request.
"""

from rest_framework import status
from rest_framework.exceptions import ParseError, UnsupportedMediaType
from rest_framework.response import Response
from rest_framework.views import exception_handler
import logging

logger = logging.getLogger("radio")


def error_handler(exc, context):
    if isinstance(exc, (UnsupportedMediaType, ParseError)):
        logger.warning(f"Rejected request body: {exc.detail}")
        return Response({"error": str(exc.detail)}, status=status.HTTP_400_BAD_REQUEST)

    response = exception_handler(exc, context)
    if response is not None and isinstance(response.data, dict) and "detail" in response.data:
        response.data = {"error": str(response.data["detail"])}
    return response
