"""Users, rooms and direct-message links of a chat server."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class User:
    """A connected user and the users linked to it for direct messages."""

    username: str
    socket: Any
    connections: list[User] = field(default_factory=list, repr=False)


@dataclass(eq=False)
class Room:
    """A named room and its members, most recent first."""

    name: str
    members: list[User] = field(default_factory=list, repr=False)


class ChatRegistry:
    """The shared state of a chat server; newest entries are listed first."""

    def __init__(self) -> None:
        self._users: list[User] = []
        self._rooms: list[Room] = []

    def add_user(self, socket: Any, username: str) -> User:
        if self.find_user(username) is not None:
            raise ValueError(f"Duplicate username: {username}")
        user = User(username, socket)
        self._users.insert(0, user)
        return user

    def find_user(self, username: str) -> User | None:
        return next((u for u in self._users if u.username == username), None)

    def remove_user(self, username: str) -> User | None:
        """Remove a user and its direct links; return it, or None if absent."""
        user = self.find_user(username)
        if user is None:
            return None
        self._users.remove(user)
        for peer in user.connections:
            if peer is not user:
                peer.connections = [c for c in peer.connections if c is not user]
        user.connections.clear()
        return user

    def user_names(self) -> list[str]:
        return [user.username for user in self._users]

    def add_room(self, roomname: str) -> Room:
        if self.find_room(roomname) is not None:
            raise ValueError(f"Duplicate room: {roomname}")
        room = Room(roomname)
        self._rooms.insert(0, room)
        return room

    def find_room(self, roomname: str) -> Room | None:
        return next((r for r in self._rooms if r.name == roomname), None)

    def remove_room(self, roomname: str) -> Room | None:
        room = self.find_room(roomname)
        if room is not None:
            self._rooms.remove(room)
        return room

    def room_names(self) -> list[str]:
        return [room.name for room in self._rooms]

    def _require_room(self, roomname: str) -> Room:
        room = self.find_room(roomname)
        if room is None:
            raise KeyError(f"Room '{roomname}' does not exist.")
        return room

    def _require_user(self, username: str) -> User:
        user = self.find_user(username)
        if user is None:
            raise KeyError(f"User '{username}' not found.")
        return user

    def join_room(self, roomname: str, username: str) -> None:
        room = self._require_room(roomname)
        user = self._require_user(username)
        if user not in room.members:
            room.members.insert(0, user)

    def leave_room(self, roomname: str, username: str) -> None:
        room = self._require_room(roomname)
        room.members = [m for m in room.members if m.username != username]

    def room_members(self, roomname: str) -> list[str]:
        return [member.username for member in self._require_room(roomname).members]

    def connect(self, user1: str, user2: str) -> bool:
        """Link two users; False if either is missing or they are already linked."""
        first, second = self.find_user(user1), self.find_user(user2)
        if first is None or second is None or second in first.connections:
            return False
        first.connections.insert(0, second)
        if second is not first:
            second.connections.insert(0, first)
        return True

    def disconnect(self, user1: str, user2: str) -> bool:
        """Unlink two users; False only if either is missing."""
        first, second = self.find_user(user1), self.find_user(user2)
        if first is None or second is None:
            return False
        first.connections = [c for c in first.connections if c is not second]
        second.connections = [c for c in second.connections if c is not first]
        return True

    def are_connected(self, user1: str, user2: str) -> bool:
        first = self.find_user(user1)
        return first is not None and any(c.username == user2 for c in first.connections)

    def rename_user(self, old: str, new: str) -> User:
        if self.find_user(new) is not None:
            raise ValueError(f"Username '{new}' is already taken.")
        user = self._require_user(old)
        user.username = new
        return user