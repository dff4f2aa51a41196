from typing import Optional

from ..domain import NotLoggedIn, User


class Session:
    """Сессия процесса: не более одного текущего пользователя.

    Устанавливается при успешном входе. Выхода нет: пользователь
    остается текущим до конца процесса или до следующего входа.
    """

    def __init__(self) -> None:
        self._current_user: Optional[User] = None

    @property
    def current_user(self) -> Optional[User]:
        return self._current_user

    @property
    def is_authenticated(self) -> bool:
        return self._current_user is not None

    def start(self, user: User) -> None:
        self._current_user = user

    def require_user(self) -> User:
        """Возвращает текущего пользователя или бросает NotLoggedIn."""
        if self._current_user is None:
            raise NotLoggedIn()
        return self._current_user
