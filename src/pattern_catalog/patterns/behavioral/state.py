"""State: an authorization presenter switching between two states."""


class AuthorizationState:
    """Base of the two authorization states."""


class _Unauthorized(AuthorizationState):
    def __repr__(self) -> str:
        return "Unauthorized"


Unauthorized = _Unauthorized()


class Authorized(AuthorizationState):
    def __init__(self, user_name: str):
        self.user_name = user_name

    def __repr__(self) -> str:
        return f"Authorized(user_name={self.user_name!r})"


class AuthorizationPresenter:
    def __init__(self):
        self._state: AuthorizationState = Unauthorized

    @property
    def state(self) -> AuthorizationState:
        return self._state

    def login_user(self, user_login: str) -> None:
        self._state = Authorized(user_login)

    def logout_user(self) -> None:
        self._state = Unauthorized

    @property
    def is_authorized(self) -> bool:
        return isinstance(self._state, Authorized)

    @property
    def user_login(self) -> str:
        state = self._state
        if isinstance(state, Authorized):
            return state.user_name
        return "Unknown"

    def __str__(self) -> str:
        return f"User '{self.user_login}' is logged in: {self.is_authorized}"


def demo() -> None:
    authorization_presenter = AuthorizationPresenter()

    authorization_presenter.login_user("admin")
    print(authorization_presenter)

    authorization_presenter.logout_user()
    print(authorization_presenter)
