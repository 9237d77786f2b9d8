#!/usr/bin/env python3
"""
User service - roommate profile, compatibility search and mutual interest.
"""

import logging
from typing import List

from sqlalchemy.exc import IntegrityError

from core.config_loader import get_config
from core.scorer import Profile, calculate_compatibility_score, to_percentage
from database.codec import decode_map, encode_map
from database.models import User
from database.repositories import MatchRepository, UserRepository
from ..exceptions import ValidationError, NotFoundError, ConflictError
from ..models.requests import ProfileUpdate
from ..models.responses import (
    Profile as ProfilePayload,
    RoommateCandidate,
    InterestResponse,
    MutualMatch,
)
from ..utils import safe_float, safe_datetime_iso
from .base import BaseService

logger = logging.getLogger(__name__)


class _PairCreatedConcurrently(ConflictError):
    """The other user inserted the pair's match row first."""


def to_profile(user: User) -> Profile:
    """Build the scorer input from a stored user."""
    return Profile(
        age=user.age,
        budget_min=safe_float(user.budget_min),
        budget_max=safe_float(user.budget_max),
        lifestyle_preferences=decode_map(user.lifestyle_preferences),
    )


class UserService(BaseService):
    """Service for profiles and roommate matching."""

    def get_profile(self, user_id: int) -> ProfilePayload:
        with self._transaction("fetching profile"):
            user = UserRepository(self.db).get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")
            return ProfilePayload(
                id=user.id,
                email=user.email,
                first_name=user.first_name,
                last_name=user.last_name,
                phone=user.phone,
                bio=user.bio,
                age=user.age,
                occupation=user.occupation,
                budget_min=safe_float(user.budget_min),
                budget_max=safe_float(user.budget_max),
                lifestyle_preferences=decode_map(user.lifestyle_preferences),
                verification_status=user.verification_status,
            )

    def update_profile(self, user_id: int, request: ProfileUpdate) -> None:
        """
        Write the submitted profile fields.

        A budget bound submitted alone must stay consistent with the stored
        other bound.
        """
        values = request.changes()
        if not values:
            raise ValidationError("No valid fields to update")
        if "lifestyle_preferences" in values:
            values["lifestyle_preferences"] = encode_map(values["lifestyle_preferences"])

        with self._transaction("updating profile"):
            repo = UserRepository(self.db)
            user = repo.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")

            budget_min = values["budget_min"] if "budget_min" in values else safe_float(user.budget_min)
            budget_max = values["budget_max"] if "budget_max" in values else safe_float(user.budget_max)
            if budget_min is not None and budget_max is not None and budget_min > budget_max:
                raise ValidationError("budget_min must not exceed budget_max")

            repo.update_profile(user_id, values)

        logger.info(f"User {user_id} updated profile: {sorted(values)}")

    def find_roommates(self, user_id: int) -> List[RoommateCandidate]:
        """
        Score verified users against ``user_id``.

        Keeps candidates at or above the compatibility threshold, highest
        first, capped at the configured maximum.
        """
        matching = get_config().matching
        weights = matching.compatibility

        with self._transaction("finding roommates"):
            repo = UserRepository(self.db)
            user = repo.get_by_id(user_id)
            if user is None:
                raise NotFoundError("User not found")

            me = to_profile(user)
            candidates = []
            for other in repo.get_verified_candidates(user_id):
                profile = to_profile(other)
                percentage = to_percentage(calculate_compatibility_score(me, profile, weights))
                if percentage < weights.min_percentage:
                    continue
                candidates.append(RoommateCandidate(
                    id=other.id,
                    first_name=other.first_name,
                    last_name=other.last_name,
                    age=other.age,
                    occupation=other.occupation,
                    bio=other.bio,
                    budget_min=profile.budget_min,
                    budget_max=profile.budget_max,
                    lifestyle_preferences=profile.lifestyle_preferences,
                    verification_status=other.verification_status,
                    compatibility_score=percentage,
                ))

        candidates.sort(key=lambda c: c.compatibility_score, reverse=True)
        return candidates[:matching.max_roommate_results]

    def express_interest(self, actor_id: int, target_id: int) -> InterestResponse:
        """
        Record ``actor_id``'s interest in ``target_id``.

        The first interest in a pair creates a pending match; interest from
        the other side turns it mutual.

        Raises:
            ValidationError: If a user targets themselves.
            NotFoundError: If the target user does not exist.
        """
        if actor_id == target_id:
            raise ValidationError("Cannot express interest in yourself")

        try:
            return self._record_interest(actor_id, target_id)
        except _PairCreatedConcurrently:
            logger.info(f"Match row for users {actor_id}/{target_id} created concurrently, retrying")
            return self._record_interest(actor_id, target_id)

    def _record_interest(self, actor_id: int, target_id: int) -> InterestResponse:
        with self._transaction("recording interest"):
            matches = MatchRepository(self.db)
            existing = matches.get_for_pair(actor_id, target_id)

            if existing is not None:
                if existing.user1_id == actor_id:
                    # Repeat of the actor's own interest; needs the other side.
                    return InterestResponse(
                        message="Interest already expressed",
                        mutual=bool(existing.mutual_interest),
                    )
                matches.mark_mutual(actor_id, target_id)
                logger.info(f"Mutual interest between users {actor_id} and {target_id}")
                return InterestResponse(message="Mutual interest established!", mutual=True)

            users = UserRepository(self.db)
            actor = users.get_by_id(actor_id)
            target = users.get_by_id(target_id)
            if target is None:
                raise NotFoundError("User not found")

            score = calculate_compatibility_score(
                to_profile(actor),
                to_profile(target),
                get_config().matching.compatibility
            )
            try:
                matches.create_match(actor_id, target_id, score)
            except IntegrityError as e:
                raise _PairCreatedConcurrently("Match already exists") from e

        return InterestResponse(message="Interest expressed successfully", mutual=False)

    def get_mutual_matches(self, user_id: int) -> List[MutualMatch]:
        """Mutual matches for ``user_id`` with the other party's details."""
        with self._transaction("listing matches"):
            rows = MatchRepository(self.db).get_mutual_for_user(user_id)
            result = []
            for match, user1, user2 in rows:
                other = user2 if match.user1_id == user_id else user1
                result.append(MutualMatch(
                    id=match.id,
                    user1_id=match.user1_id,
                    user2_id=match.user2_id,
                    compatibility_score=safe_float(match.compatibility_score),
                    mutual_interest=bool(match.mutual_interest),
                    created_at=safe_datetime_iso(match.created_at),
                    user_id=other.id,
                    first_name=other.first_name,
                    last_name=other.last_name,
                    email=other.email,
                    age=other.age,
                    occupation=other.occupation,
                    bio=other.bio,
                ))
            return result
