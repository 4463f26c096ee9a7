"""
Базовый класс API-контроллеров.

Централизованная обработка доменных ошибок:
- ValidationError → 400
- NotFoundError → 404
- ConflictError → 409
- прочее → 500
"""

import logging

from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from core.exceptions import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
)


class BaseDomainAPIView(APIView):
    """Базовый класс для API с доменными сервисами."""

    permission_classes = [IsAuthenticated]

    def ok(self, payload: dict = None, status_code: int = status.HTTP_200_OK):
        return Response({"ok": True, **(payload or {})}, status=status_code)

    def handle_error(self, e: Exception):
        """Централизованная обработка ошибок."""
        if isinstance(e, DomainError):
            for error_cls, status_code in _STATUS_BY_ERROR:
                if isinstance(e, error_cls):
                    break
            else:
                status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
            return Response(
                {"ok": False, "error": e.message, "details": e.details},
                status=status_code,
            )

        logger.exception("Error inesperado en %s", self.__class__.__name__)
        return Response(
            {"ok": False, "error": "Error interno", "details": {}},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
