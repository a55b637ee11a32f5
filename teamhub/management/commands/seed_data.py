from datetime import datetime, timezone

from django.contrib.auth.hashers import make_password
from django.core.management.base import BaseCommand

from teamhub.constants.role import UserRole
from teamhub.constants.team import ApprovalState, Gender
from teamhub.models.team import MemberModel, TeamModel
from teamhub.models.user import UserModel
from teamhub.repositories.team_repository import TeamRepository
from teamhub.repositories.user_repository import UserRepository
from teamhub_project.db.init import initialize_database

DEMO_PASSWORD = "password123"

DEMO_USERS = [
    {"email": "manager@demo.com", "name": "John Manager", "role": UserRole.MANAGER},
    {"email": "director@demo.com", "name": "Jane Director", "role": UserRole.DIRECTOR},
    {"email": "member@demo.com", "name": "Bob Member", "role": UserRole.MEMBER},
]


def _member(name: str, gender: Gender, date_of_birth: str, contact_no: str) -> MemberModel:
    return MemberModel(
        name=name,
        gender=gender,
        dateOfBirth=datetime.fromisoformat(date_of_birth).replace(tzinfo=timezone.utc),
        contactNo=contact_no,
    )


DEMO_TEAMS = [
    {
        "teamName": "Team Alpha",
        "teamDescription": "Frontend development team",
        "approvedByManager": ApprovalState.APPROVED,
        "approvedByDirector": ApprovalState.PENDING,
        "members": [
            ("Alice Johnson", Gender.FEMALE, "1990-05-15", "1234567890"),
            ("Bob Smith", Gender.MALE, "1988-12-03", "9876543210"),
        ],
    },
    {
        "teamName": "Team Beta",
        "teamDescription": "Backend development team",
        "approvedByManager": ApprovalState.PENDING,
        "approvedByDirector": ApprovalState.APPROVED,
        "members": [
            ("Charlie Brown", Gender.MALE, "1992-08-20", "5555555555"),
        ],
    },
    {
        "teamName": "Team Gamma",
        "teamDescription": "DevOps and infrastructure team",
        "approvedByManager": ApprovalState.REJECTED,
        "approvedByDirector": ApprovalState.REJECTED,
        "members": [
            ("Diana Prince", Gender.FEMALE, "1985-03-10", "1111111111"),
            ("Eve Wilson", Gender.OTHER, "1995-11-25", "2222222222"),
        ],
    },
    {
        "teamName": "Team Delta",
        "teamDescription": "Quality assurance team",
        "approvedByManager": ApprovalState.PENDING,
        "approvedByDirector": ApprovalState.PENDING,
        "members": [
            ("Frank Miller", Gender.MALE, "1987-07-14", "3333333333"),
            ("Grace Lee", Gender.FEMALE, "1993-09-08", "4444444444"),
            ("Henry Davis", Gender.MALE, "1991-01-30", "6666666666"),
        ],
    },
]


class Command(BaseCommand):
    help = "Replace all users and teams with demo data"

    def handle(self, *args, **options):
        if not initialize_database():
            self.stdout.write(self.style.ERROR("Database is not reachable, nothing was seeded"))
            return

        UserRepository.get_collection().delete_many({})
        TeamRepository.get_collection().delete_many({})
        self.stdout.write("Cleared users and teams")

        for user_data in DEMO_USERS:
            UserRepository.create(UserModel(password=make_password(DEMO_PASSWORD), **user_data))
        self.stdout.write(f"Created users: {len(DEMO_USERS)}")

        for display_order, team_data in enumerate(DEMO_TEAMS):
            members = [_member(*member) for member in team_data["members"]]
            TeamRepository.create(TeamModel(**{**team_data, "members": members, "displayOrder": display_order}))
        self.stdout.write(f"Created teams: {len(DEMO_TEAMS)}")

        self.stdout.write(self.style.SUCCESS("Database seeded successfully!"))
