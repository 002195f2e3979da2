"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Map domain errors to HTTP responses
- Never contain business logic
- Never expose internal error details
"""

import logging

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from statements.domain.errors import DomainError
from statements.handlers.serializers import (
    StatementRequestSerializer,
    StatementSerializer,
)
from statements.services.statement_service import StatementService

logger = logging.getLogger(__name__)

INVALID_REQUEST = "INVALID_REQUEST"


class StatementView(APIView):
    """Handler for POST /api/statements"""

    def post(self, request: Request) -> Response:
        serializer = StatementRequestSerializer(data=request.data)
        if not serializer.is_valid():
            logger.warning("Rejected statement request: %s", serializer.errors)
            return Response(
                {
                    "code": INVALID_REQUEST,
                    "message": "Invalid statement request",
                    "fields": serializer.errors,
                },
                status=status.HTTP_400_BAD_REQUEST,
            )

        service = StatementService(serializer.to_catalog())
        try:
            statement = service.build(serializer.to_summary())
        except DomainError as error:
            logger.warning("Statement generation failed: %s", error)
            return Response(
                {"code": error.code.value, "message": error.message},
                status=status.HTTP_422_UNPROCESSABLE_ENTITY,
            )

        data = dict(StatementSerializer(statement).data)
        data["text"] = service.render(statement)
        return Response(data)
