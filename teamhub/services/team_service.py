import logging
from typing import List

from teamhub.constants.messages import AppMessages
from teamhub.constants.team import APPROVAL_FIELD_BY_TYPE, ApprovalState, ApprovalType, FIRST_DISPLAY_ORDER
from teamhub.dto.team_dto import CreateTeamDTO, TeamDTO
from teamhub.dto.update_team_dto import UpdateTeamDTO
from teamhub.dto.responses.paginated_response import PaginationDTO
from teamhub.dto.responses.team_response import (
    BulkDeleteTeamsResponse,
    DeletedCountDTO,
    GetTeamsResponse,
    MessageResponse,
    TeamResponse,
)
from teamhub.exceptions.team_exceptions import (
    DuplicateTeamNameException,
    LastMemberRemovalException,
    TeamNotFoundException,
)
from teamhub.models.team import MemberModel, TeamModel
from teamhub.repositories.team_repository import TeamRepository
from teamhub.services.permission_service import PermissionService

logger = logging.getLogger(__name__)


class TeamService:
    @classmethod
    def get_teams(cls, search: str | None, page: int, limit: int) -> GetTeamsResponse:
        """
        Get one page of teams ordered by display order, filtered by a free-text search
        over team name, team description and member names.
        """
        teams, total = TeamRepository.list(search, page, limit)
        return GetTeamsResponse(
            data=[TeamDTO.from_model(team) for team in teams],
            pagination=PaginationDTO.from_counts(page=page, limit=limit, total=total),
        )

    @classmethod
    def get_team_by_id(cls, team_id: str) -> TeamDTO:
        return TeamDTO.from_model(cls._get_team_or_raise(team_id))

    @classmethod
    def create_team(cls, dto: CreateTeamDTO) -> TeamResponse:
        """
        Create a team with its members.

        Args:
            dto: validated team name, description and members

        Returns:
            TeamResponse with the created team, placed after every existing team

        Raises:
            DuplicateTeamNameException: if another team already uses the name
        """
        team_name = dto.teamName.strip()
        if TeamRepository.get_by_name(team_name):
            logger.info(f"Rejected create: team name {team_name!r} already exists")
            raise DuplicateTeamNameException()

        # Not atomic with the insert; concurrent creates may share an order value.
        max_order = TeamRepository.get_max_display_order()
        next_order = max_order + 1 if max_order is not None else FIRST_DISPLAY_ORDER

        team = TeamModel(
            teamName=team_name,
            teamDescription=dto.teamDescription.strip(),
            members=cls._to_member_models(dto.members),
            displayOrder=next_order,
        )
        created_team = TeamRepository.create(team)
        logger.info(f"Created team {created_team.id} at display order {next_order}")

        return TeamResponse(data=TeamDTO.from_model(created_team), message=AppMessages.TEAM_CREATED)

    @classmethod
    def update_team(cls, team_id: str, dto: UpdateTeamDTO) -> TeamResponse:
        """
        Apply a partial update. A new ``members`` list replaces the current one
        and must not be empty.
        """
        existing_team = cls._get_team_or_raise(team_id)
        update_data = dto.model_dump(exclude_unset=True, exclude_none=True)

        if dto.members is not None and len(dto.members) == 0:
            logger.info(f"Rejected update of team {team_id}: would remove the last member")
            raise LastMemberRemovalException()

        new_name = update_data.get("teamName")
        if new_name and new_name != existing_team.teamName:
            if TeamRepository.get_by_name(new_name, exclude_team_id=team_id):
                logger.info(f"Rejected update of team {team_id}: name {new_name!r} already exists")
                raise DuplicateTeamNameException()

        if "members" in update_data:
            update_data["members"] = [
                member.model_dump() for member in cls._to_member_models(dto.members)
            ]
        for field in ("approvedByManager", "approvedByDirector"):
            if isinstance(update_data.get(field), ApprovalState):
                update_data[field] = update_data[field].value

        if not update_data:
            return TeamResponse(data=TeamDTO.from_model(existing_team), message=AppMessages.TEAM_UPDATED)

        updated_team = TeamRepository.update(team_id, update_data)
        if updated_team is None:
            raise TeamNotFoundException(team_id)

        return TeamResponse(data=TeamDTO.from_model(updated_team), message=AppMessages.TEAM_UPDATED)

    @classmethod
    def update_approval(
        cls, team_id: str, approval_type: ApprovalType, status: ApprovalState, user_role
    ) -> TeamResponse:
        """
        Set exactly one of the two approval fields. Manager and director approvals are
        independent: any state may follow any other.
        """
        PermissionService.require_approver(user_role)

        cls._get_team_or_raise(team_id)
        field = APPROVAL_FIELD_BY_TYPE[ApprovalType(approval_type)]
        updated_team = TeamRepository.update(team_id, {field: ApprovalState(status).value})
        if updated_team is None:
            raise TeamNotFoundException(team_id)

        logger.info(f"Team {team_id} {field} set to {ApprovalState(status).value}")
        return TeamResponse(data=TeamDTO.from_model(updated_team), message=AppMessages.TEAM_APPROVAL_UPDATED)

    @classmethod
    def reorder_team(cls, team_id: str, new_order: int) -> TeamResponse:
        """
        Move a team to ``new_order`` and shift the teams in between by one.

        The move and the shift are separate writes without a transaction, so a failure
        or a concurrent reorder in between can leave duplicate or missing orders.
        """
        team = cls._get_team_or_raise(team_id)
        old_order = team.displayOrder

        if old_order == new_order:
            return TeamResponse(data=TeamDTO.from_model(team), message=AppMessages.TEAM_ORDER_UNCHANGED)

        TeamRepository.update(team_id, {"displayOrder": new_order})
        shifted = TeamRepository.shift_display_orders(team_id, old_order, new_order)
        logger.info(f"Moved team {team_id} from order {old_order} to {new_order}, shifted {shifted} teams")

        updated_team = cls._get_team_or_raise(team_id)
        return TeamResponse(data=TeamDTO.from_model(updated_team), message=AppMessages.TEAM_ORDER_UPDATED)

    @classmethod
    def delete_team(cls, team_id: str) -> MessageResponse:
        if not TeamRepository.delete_by_id(team_id):
            raise TeamNotFoundException(team_id)
        logger.info(f"Deleted team {team_id}")
        return MessageResponse(message=AppMessages.TEAM_DELETED)

    @classmethod
    def bulk_delete_teams(cls, team_ids: List[str]) -> BulkDeleteTeamsResponse:
        deleted_count = TeamRepository.delete_many(team_ids)
        logger.info(f"Bulk delete removed {deleted_count} of {len(team_ids)} requested teams")
        return BulkDeleteTeamsResponse(
            data=DeletedCountDTO(deletedCount=deleted_count),
            message=AppMessages.TEAMS_BULK_DELETED.format(deleted_count),
        )

    @classmethod
    def _get_team_or_raise(cls, team_id: str) -> TeamModel:
        team = TeamRepository.get_by_id(team_id)
        if team is None:
            raise TeamNotFoundException(team_id)
        return team

    @classmethod
    def _to_member_models(cls, members) -> List[MemberModel]:
        return [
            MemberModel(
                name=member.name.strip(),
                gender=member.gender,
                dateOfBirth=member.dateOfBirth,
                contactNo=member.contactNo,
            )
            for member in members
        ]
