# ct_core/iam/api/me.py

from __future__ import annotations

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from ct_core.common.permissions import _user_roles
from ct_core.iam.api.schema_serializers import MeResponseSerializer
from ct_core.iam.identity import CurrentUserMixin


class MeView(CurrentUserMixin, APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(responses={200: MeResponseSerializer}, tags=["IAM"])
    def get(self, request):
        """
        Returns the caller and the roles that gate lab/doctor endpoints.
        """
        user = self.current_user(request)
        return Response(
            {
                "user": {
                    "id": user.id,
                    "username": getattr(user, "username", None),
                    "email": getattr(user, "email", None) or None,
                    "is_superuser": bool(getattr(user, "is_superuser", False)),
                },
                "roles": sorted(_user_roles(user)),
            },
            status=status.HTTP_200_OK,
        )
