"""Cheese rating operations and the service object the HTTP layer talks to.

The module-level functions are the core operations. They take the registry
and user they act on explicitly, are synchronous, and either complete or
raise without having changed anything.

``CheeseWizardService`` owns one registry plus the known users for a running
application and serializes every call through a lock.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Iterable

from cheese_wizard.core.errors import AppError
from cheese_wizard.domain.errors import DuplicateRatingError, UserNotFoundError
from cheese_wizard.domain.models import Cheese, User
from cheese_wizard.domain.rating import CheeseRating
from cheese_wizard.domain.registry import CheeseRegistry
from cheese_wizard.domain.requests import CheeseRatingRequest, NewCheeseRequest

logger = logging.getLogger(__name__)


def rate_cheese(
    request: CheeseRatingRequest,
    user: User,
    registry: CheeseRegistry,
) -> None:
    """Record ``user``'s rating of a registered cheese on both sides.

    Every check runs before either rating map is touched, so a failure leaves
    the registry and the user exactly as they were.

    Args:
        request: Target cheese name and raw rating.
        user: The rater; receives the rating under the cheese name.
        registry: Registry holding the cheese; the cheese receives the rating
            under the user's id.

    Raises:
        NameNotFoundError: If the cheese is not registered.
        RatingBoundsError: If the raw rating is out of range.
        DuplicateRatingError: If this user already rated this cheese (on
            either side).
    """
    cheese = registry.get_mut(request.cheese)
    rating = CheeseRating.create(request.rating)

    if user.id in cheese.ratings:
        raise DuplicateRatingError.for_key(user.id)
    if cheese.name in user.ratings:
        raise DuplicateRatingError.for_key(cheese.name)

    cheese.insert_rating(user.id, rating)
    user.insert_rating(cheese.name, rating)


def create_new_cheese(request: NewCheeseRequest, registry: CheeseRegistry) -> Cheese:
    """Register a cheese with no ratings.

    Raises:
        DuplicateNameError: If a cheese with this name is already registered.
    """
    cheese = Cheese(name=request.name)
    registry.insert(cheese)
    return cheese


def all_cheeses(registry: CheeseRegistry) -> list[Cheese]:
    """Every registered cheese, sorted by name."""
    return registry.all()


class CheeseWizardService:
    """In-process owner of the cheese registry and the users rating it.

    Thread-safe: all reads and writes hold a single re-entrant lock, so one
    operation runs at a time per service instance.

    Attributes:
        registry: The cheese registry operations act on.
    """

    def __init__(self, registry: CheeseRegistry | None = None) -> None:
        self.registry = CheeseRegistry() if registry is None else registry
        self._users: dict[uuid.UUID, User] = {}
        self._lock = threading.RLock()

    def seed(self, names: Iterable[str]) -> None:
        """Register each name not already present."""
        with self._lock:
            for name in names:
                if name in self.registry:
                    continue
                create_new_cheese(NewCheeseRequest(name=name), self.registry)
            logger.info("cheese.seeded", extra={"cheese_count": len(self.registry)})

    def create_cheese(self, request: NewCheeseRequest) -> Cheese:
        with self._lock:
            cheese = create_new_cheese(request, self.registry)
        logger.info("cheese.created", extra={"cheese": cheese.name})
        return cheese

    def get_cheese(self, name: str) -> Cheese:
        with self._lock:
            return self.registry.get(name)

    def list_cheeses(self) -> list[Cheese]:
        with self._lock:
            return all_cheeses(self.registry)

    def create_user(self, *, name: str = "", age: int = 0) -> User:
        user = User(name=name, age=age)
        with self._lock:
            self._users[user.id] = user
        logger.info("user.created", extra={"user_id": str(user.id)})
        return user

    def get_user(self, user_id: uuid.UUID) -> User:
        """Look up a user created by this service.

        Raises:
            UserNotFoundError: If the id is unknown.
        """
        with self._lock:
            user = self._users.get(user_id)
        if user is None:
            raise UserNotFoundError.for_id(user_id)
        return user

    def rate(self, user_id: uuid.UUID, request: CheeseRatingRequest) -> User:
        """Rate a cheese on behalf of a known user and return that user."""
        with self._lock:
            try:
                user = self.get_user(user_id)
                rate_cheese(request, user, self.registry)
            except AppError as exc:
                logger.warning(
                    "cheese.rating_rejected",
                    extra={
                        "reason": exc.code,
                        "cheese": request.cheese,
                        "user_id": str(user_id),
                    },
                )
                raise
        logger.info(
            "cheese.rated",
            extra={
                "cheese": request.cheese,
                "user_id": str(user_id),
                "rating": request.rating,
            },
        )
        return user
