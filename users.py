from dataclasses import dataclass
from threading import Lock
from typing import Optional


@dataclass(frozen=True)
class UserRecord:
    username: str
    password: str

    @classmethod
    def from_json(cls, data):
        """Builds a record from a decoded JSON body. Returns None if a field is missing."""
        username = data.get('username')
        password = data.get('password')
        if username is None or password is None:
            return None
        return cls(username=username, password=password)

    def to_dict(self):
        return {'username': self.username, 'password': self.password}


class UserRegistry:
    """In-memory list of user records, unique by username."""

    def __init__(self):
        self._users = []
        self._lock = Lock()  # Covers the whole check-then-append in add()

    def __len__(self):
        with self._lock:
            return len(self._users)

    def add(self, record: UserRecord) -> bool:
        """Stores the record unless the username is taken. The existing record always wins."""
        with self._lock:
            if any(u.username == record.username for u in self._users):
                return False
            self._users.append(record)
            return True

    def lookup(self, username: str, password: str) -> Optional[UserRecord]:
        with self._lock:
            return next((u for u in self._users if u.username == username and u.password == password), None)
