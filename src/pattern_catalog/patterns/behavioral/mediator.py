"""Mediator: chat users talk through a mediator instead of to each other."""
from typing import List


class ChatUser:
    def __init__(self, mediator: "ChatMediator", name: str):
        self._mediator = mediator
        self.name = name

    def send(self, msg: str) -> None:
        print(f"{self.name}: Sending Message= {msg}")
        self._mediator.send_message(msg, self)

    def receive(self, msg: str) -> None:
        print(f"{self.name}: Message received: {msg}")


class ChatMediator:
    """Delivers each message to every registered user except its sender."""

    def __init__(self):
        self._users: List[ChatUser] = []

    def send_message(self, msg: str, user: ChatUser) -> None:
        for recipient in self._users:
            if recipient is not user:
                recipient.receive(msg)

    def add_user(self, user: ChatUser) -> "ChatMediator":
        self._users.append(user)
        return self


def demo() -> None:
    mediator = ChatMediator()
    john = ChatUser(mediator, "John")

    mediator.add_user(ChatUser(mediator, "Alice")).add_user(ChatUser(mediator, "Bob")).add_user(john)

    john.send("Hi everyone!")
