from unittest import TestCase
from unittest.mock import Mock

from teamhub.constants.role import UserRole
from teamhub.exceptions.auth_exceptions import TokenMissingError
from teamhub.exceptions.permission_exceptions import InsufficientRoleError
from teamhub.utils.permissions import CanApproveTeams, IsAuthenticatedSession


class IsAuthenticatedSessionTests(TestCase):
    def test_allows_request_with_user(self):
        request = Mock(user_id="507f1f77bcf86cd799439011")

        self.assertTrue(IsAuthenticatedSession().has_permission(request, None))

    def test_rejects_request_without_user(self):
        request = Mock(spec=[])

        with self.assertRaises(TokenMissingError):
            IsAuthenticatedSession().has_permission(request, None)


class CanApproveTeamsTests(TestCase):
    def test_approver_roles_are_allowed(self):
        for role in (UserRole.MANAGER, UserRole.DIRECTOR):
            with self.subTest(role=role):
                request = Mock(user_id="507f1f77bcf86cd799439011", user_role=role)
                self.assertTrue(CanApproveTeams().has_permission(request, None))

    def test_member_is_rejected(self):
        request = Mock(user_id="507f1f77bcf86cd799439011", user_role=UserRole.MEMBER)

        with self.assertRaises(InsufficientRoleError):
            CanApproveTeams().has_permission(request, None)

    def test_unauthenticated_request_fails_before_role_check(self):
        with self.assertRaises(TokenMissingError):
            CanApproveTeams().has_permission(Mock(spec=[]), None)
