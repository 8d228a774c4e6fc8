"""Chain of Responsibility: each link appends its part of an HTTP-like message."""
from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.domain.core.exceptions import MissingTokenError


class HeadersChain(ABC):
    """A link of the chain; passes its output on to ``successor`` if set."""

    def __init__(self, successor: Optional["HeadersChain"] = None):
        self.successor = successor

    def add_header(self, input_header: str) -> str:
        header = input_header + self.render()
        if self.successor is None:
            return header
        return self.successor.add_header(header)

    @abstractmethod
    def render(self) -> str:
        """Text this link contributes."""


class AuthenticationHeader(HeadersChain):
    def __init__(self, token: Optional[str], successor: Optional[HeadersChain] = None):
        super().__init__(successor)
        self.token = token

    def render(self) -> str:
        if self.token is None:
            raise MissingTokenError()
        return f"Authorization: Bearer {self.token}\n"


class ContentTypeHeader(HeadersChain):
    def __init__(self, content_type: str, successor: Optional[HeadersChain] = None):
        super().__init__(successor)
        self.content_type = content_type

    def render(self) -> str:
        return f"ContentType: {self.content_type}\n"


class BodyPayload(HeadersChain):
    def __init__(self, body: str, successor: Optional[HeadersChain] = None):
        super().__init__(successor)
        self.body = body

    def render(self) -> str:
        return self.body


def demo() -> None:
    authentication_header = AuthenticationHeader("123456")
    content_type_header = ContentTypeHeader("json")
    message_body = BodyPayload('Body:\n{\n"username"="dbacinski"\n}')

    authentication_header.successor = content_type_header
    content_type_header.successor = message_body

    print(authentication_header.add_header("Headers with Authentication:\n"))
    print(content_type_header.add_header("Headers:\n"))
