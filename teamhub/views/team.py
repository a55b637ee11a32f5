from rest_framework.views import APIView
from rest_framework.response import Response
from rest_framework import status
from rest_framework.request import Request
from drf_spectacular.utils import extend_schema, OpenApiParameter, OpenApiResponse
from drf_spectacular.types import OpenApiTypes

from teamhub.serializers.create_team_serializer import CreateTeamSerializer
from teamhub.serializers.update_team_serializer import UpdateTeamSerializer
from teamhub.serializers.approve_team_serializer import ApproveTeamSerializer
from teamhub.serializers.reorder_team_serializer import ReorderTeamSerializer
from teamhub.serializers.bulk_delete_teams_serializer import BulkDeleteTeamsSerializer
from teamhub.serializers.get_teams_serializer import GetTeamsQueryParamsSerializer
from teamhub.services.team_service import TeamService
from teamhub.dto.team_dto import CreateTeamDTO
from teamhub.dto.update_team_dto import UpdateTeamDTO
from teamhub.dto.responses.team_response import (
    BulkDeleteTeamsResponse,
    GetTeamsResponse,
    MessageResponse,
    TeamResponse,
)
from teamhub.dto.responses.error_response import ApiErrorResponse
from teamhub.utils.permissions import CanApproveTeams, IsAuthenticatedSession

TEAM_ID_PARAMETER = OpenApiParameter(
    name="team_id",
    type=OpenApiTypes.STR,
    location=OpenApiParameter.PATH,
    description="Unique identifier of the team",
)


class TeamListView(APIView):
    permission_classes = [IsAuthenticatedSession]

    @extend_schema(
        operation_id="get_teams",
        summary="List teams",
        description="Get a page of teams sorted by display order, optionally filtered by a search over team name, description and member names.",
        tags=["teams"],
        parameters=[
            OpenApiParameter(
                name="search",
                type=OpenApiTypes.STR,
                location=OpenApiParameter.QUERY,
                description="Case-insensitive text matched against team name, description and member names",
                required=False,
            ),
            OpenApiParameter(
                name="page",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Page number, starting at 1",
                required=False,
            ),
            OpenApiParameter(
                name="limit",
                type=OpenApiTypes.INT,
                location=OpenApiParameter.QUERY,
                description="Number of teams per page (max 100)",
                required=False,
            ),
        ],
        responses={
            200: OpenApiResponse(response=GetTeamsResponse, description="Teams retrieved successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - invalid query parameters"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Unauthorized"),
        },
    )
    def get(self, request: Request):
        query = GetTeamsQueryParamsSerializer(data=request.query_params)
        query.is_valid(raise_exception=True)

        response: GetTeamsResponse = TeamService.get_teams(
            search=query.validated_data["search"],
            page=query.validated_data["page"],
            limit=query.validated_data["limit"],
        )
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="create_team",
        summary="Create a new team",
        description="Create a team with at least one member. The team is placed after every existing team.",
        tags=["teams"],
        request=CreateTeamSerializer,
        responses={
            201: OpenApiResponse(response=TeamResponse, description="Team created successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error or duplicate name"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Unauthorized"),
        },
    )
    def post(self, request: Request):
        serializer = CreateTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = CreateTeamDTO(**serializer.validated_data)
        response: TeamResponse = TeamService.create_team(dto)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_201_CREATED)


class BulkDeleteTeamsView(APIView):
    permission_classes = [IsAuthenticatedSession]

    @extend_schema(
        operation_id="bulk_delete_teams",
        summary="Delete several teams",
        description="Delete every team whose id is listed. Ids that match no team are ignored.",
        tags=["teams"],
        request=BulkDeleteTeamsSerializer,
        responses={
            200: OpenApiResponse(response=BulkDeleteTeamsResponse, description="Teams deleted"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - no team ids given"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Unauthorized"),
        },
    )
    def delete(self, request: Request):
        serializer = BulkDeleteTeamsSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response: BulkDeleteTeamsResponse = TeamService.bulk_delete_teams(serializer.validated_data["teamIds"])
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamReorderView(APIView):
    permission_classes = [IsAuthenticatedSession]

    @extend_schema(
        operation_id="reorder_team",
        summary="Move a team to a new display position",
        description="Set a team's display order and shift the teams between its old and new position by one.",
        tags=["teams"],
        request=ReorderTeamSerializer,
        responses={
            200: OpenApiResponse(response=TeamResponse, description="Team order updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error"),
            401: OpenApiResponse(response=ApiErrorResponse, description="Unauthorized"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def put(self, request: Request):
        serializer = ReorderTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response: TeamResponse = TeamService.reorder_team(
            serializer.validated_data["teamId"], serializer.validated_data["newOrder"]
        )
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamDetailView(APIView):
    permission_classes = [IsAuthenticatedSession]

    @extend_schema(
        operation_id="get_team_by_id",
        summary="Get team by ID",
        description="Retrieve a single team by its unique identifier.",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=TeamResponse, description="Team retrieved successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - invalid team id"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def get(self, request: Request, team_id: str):
        team = TeamService.get_team_by_id(team_id)
        response = TeamResponse(data=team)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    @extend_schema(
        operation_id="update_team",
        summary="Update team",
        description="Update any subset of a team's fields. A members list replaces the current members and may not be empty.",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        request=UpdateTeamSerializer,
        responses={
            200: OpenApiResponse(response=TeamResponse, description="Team updated successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error or business rule violation"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def put(self, request: Request, team_id: str):
        return self._update(request, team_id)

    @extend_schema(
        operation_id="patch_team",
        summary="Partially update team",
        description="Same as PUT: only the fields sent are changed.",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        request=UpdateTeamSerializer,
        responses={
            200: OpenApiResponse(response=TeamResponse, description="Team updated successfully"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - validation error or business rule violation"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def patch(self, request: Request, team_id: str):
        return self._update(request, team_id)

    @extend_schema(
        operation_id="delete_team",
        summary="Delete team",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        responses={
            200: OpenApiResponse(response=MessageResponse, description="Team deleted successfully"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def delete(self, request: Request, team_id: str):
        response: MessageResponse = TeamService.delete_team(team_id)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)

    def _update(self, request: Request, team_id: str):
        serializer = UpdateTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        dto = UpdateTeamDTO(**serializer.validated_data)
        response: TeamResponse = TeamService.update_team(team_id, dto)
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)


class TeamApprovalView(APIView):
    permission_classes = [CanApproveTeams]

    @extend_schema(
        operation_id="update_team_approval",
        summary="Approve or reject a team",
        description="Set the manager or director approval of a team. Only managers and directors may call this.",
        tags=["teams"],
        parameters=[TEAM_ID_PARAMETER],
        request=ApproveTeamSerializer,
        responses={
            200: OpenApiResponse(response=TeamResponse, description="Approval updated"),
            400: OpenApiResponse(response=ApiErrorResponse, description="Bad request - invalid approval type or status"),
            403: OpenApiResponse(response=ApiErrorResponse, description="Forbidden - caller is not a manager or director"),
            404: OpenApiResponse(response=ApiErrorResponse, description="Team not found"),
        },
    )
    def put(self, request: Request, team_id: str):
        serializer = ApproveTeamSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        response: TeamResponse = TeamService.update_approval(
            team_id=team_id,
            approval_type=serializer.validated_data["approvalType"],
            status=serializer.validated_data["status"],
            user_role=request.user_role,
        )
        return Response(data=response.model_dump(mode="json"), status=status.HTTP_200_OK)
