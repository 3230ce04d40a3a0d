"""The register of users."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from helpdesk.dates import Date
from helpdesk.user import User

REFERENCE_DATE = Date(18, 2, 2025)


class UserList:
    """Users in registration order, unique by CPF."""

    def __init__(self, users: Iterable[User] = ()) -> None:
        self._users: list[User] = []
        for user in users:
            self.add(user)

    def add(self, user: User) -> bool:
        """Register ``user`` unless its CPF is taken; report whether it was added."""
        if self.find_index(user.cpf) is not None:
            return False
        self._users.append(user)
        return True

    def find_index(self, cpf: str) -> int | None:
        """Position of the user with ``cpf``, or None."""
        return next((i for i, user in enumerate(self._users) if user.cpf == cpf), None)

    def __len__(self) -> int:
        return len(self._users)

    def __getitem__(self, index: int) -> User:
        return self._users[index]

    def __iter__(self) -> Iterator[User]:
        return iter(self._users)

    def ranking(self) -> UserList:
        """Copies ordered by requested tickets, most first, ties by name."""
        ordered = sorted(
            (user.copy() for user in self._users),
            key=lambda user: (-user.ticket_count, user.name),
        )
        return UserList(ordered)

    def _render_with(self, header: str, footer: str) -> str:
        body = "".join(f"--------------------\n{user.render()}" for user in self._users)
        return f"{header}\n{body}{footer}\n\n"

    def render(self) -> str:
        return self._render_with(
            "----- BANCO DE USUARIOS -----", "----------------------------"
        )

    def render_ranking(self) -> str:
        return self._render_with(
            "----- RANKING DE USUARIOS -----", "-------------------------------"
        )

    def average_age(self) -> int:
        """Mean age in whole years on the reference date, truncated."""
        if not self._users:
            raise ZeroDivisionError("average of an empty list")
        total = sum(user.birth_date.years_until(REFERENCE_DATE) for user in self._users)
        quotient = abs(total) // len(self._users)
        return quotient if total >= 0 else -quotient