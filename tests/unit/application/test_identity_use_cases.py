"""Unit tests for follow and profile use cases."""

import pytest

from skillshare.application.identity.use_cases import (
    FollowUserUseCase,
    UpdateUserProfileUseCase,
    UserProfileUseCase,
)
from skillshare.domain.common.exceptions import ValidationError
from skillshare.domain.identity.entities.user import User
from skillshare.exceptions import SelfFollowError, UserNotFoundError


@pytest.fixture
def users(user_repository) -> tuple[User, User]:
    return (
        user_repository.save(User.create("ada@example.com", "Ada")),
        user_repository.save(User.create("alan@example.com", "Alan")),
    )


class TestFollowUser:
    def test_follow_persists_both_sides(self, users, user_repository) -> None:
        ada, alan = users

        result = FollowUserUseCase(user_repository).follow(ada.id.value, alan.id.value)

        assert result.following_count == 1
        stored_alan = user_repository.find_by_id(alan.id)
        assert stored_alan.follower_count == 1
        assert stored_alan.is_followed_by(ada.id)

    def test_unfollow(self, users, user_repository) -> None:
        ada, alan = users
        use_case = FollowUserUseCase(user_repository)
        use_case.follow(ada.id.value, alan.id.value)

        result = use_case.unfollow(ada.id.value, alan.id.value)

        assert result.following_count == 0
        assert user_repository.find_by_id(alan.id).follower_count == 0

    def test_self_follow(self, users, user_repository) -> None:
        with pytest.raises(SelfFollowError):
            FollowUserUseCase(user_repository).follow(users[0].id.value, users[0].id.value)

    def test_unknown_target(self, users, user_repository) -> None:
        with pytest.raises(UserNotFoundError):
            FollowUserUseCase(user_repository).follow(users[0].id.value, 404)


class TestUserProfile:
    def test_profile_and_lists(self, users, user_repository) -> None:
        ada, alan = users
        FollowUserUseCase(user_repository).follow(ada.id.value, alan.id.value)
        use_case = UserProfileUseCase(user_repository)

        assert use_case.get_profile(alan.id.value, ada.id.value).is_following is True
        assert use_case.get_profile(ada.id.value, alan.id.value).is_following is False
        assert use_case.is_following(ada.id.value, alan.id.value) is True
        assert [u.id for u in use_case.get_followers(alan.id.value)] == [ada.id]
        assert [u.id for u in use_case.get_following(ada.id.value)] == [alan.id]

    def test_unknown_user(self, user_repository) -> None:
        with pytest.raises(UserNotFoundError):
            UserProfileUseCase(user_repository).get_user(404)

    def test_followers_sorted_by_id(self, users, user_repository) -> None:
        ada, alan = users
        grace = user_repository.save(User.create("grace@example.com", "Grace"))
        follow = FollowUserUseCase(user_repository)
        follow.follow(grace.id.value, ada.id.value)
        follow.follow(alan.id.value, ada.id.value)

        followers = UserProfileUseCase(user_repository).get_followers(ada.id.value)

        assert [u.id for u in followers] == [alan.id, grace.id]

    def test_out_of_range_ids(self, users, user_repository) -> None:
        use_case = UserProfileUseCase(user_repository)

        with pytest.raises(UserNotFoundError):
            use_case.get_followers(-1)
        with pytest.raises(UserNotFoundError):
            FollowUserUseCase(user_repository).follow(users[0].id.value, -1)
        assert use_case.is_following(users[0].id.value, 0) is False


class TestUpdateUserProfile:
    def test_update_profile(self, users, user_repository) -> None:
        ada, _ = users

        result = UpdateUserProfileUseCase(user_repository).update_profile(
            ada.id.value, "Augusta", " King "
        )

        assert result.display_name == "Augusta King"
        assert user_repository.find_by_id(ada.id).last_name == "King"

    def test_unknown_user(self, user_repository) -> None:
        with pytest.raises(UserNotFoundError):
            UpdateUserProfileUseCase(user_repository).update_profile(404, "A", "B")

    def test_too_long_name_not_saved(self, users, user_repository) -> None:
        ada, _ = users

        with pytest.raises(ValidationError):
            UpdateUserProfileUseCase(user_repository).update_profile(ada.id.value, "x" * 101, None)

        assert user_repository.find_by_id(ada.id).first_name == "Ada"
