from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, List, Optional

from config import USERS_URL
from errors import EmptyDataError, InvalidArgumentError, LoadError, NoMatchError, TransportError
from http_client import JsonClient, RequestsJsonClient
from models import UserRecord, strict_equals


@dataclass
class UserDataAccessor:
    """Holds one in-memory snapshot of user records and answers queries on it.

    An empty snapshot means "nothing loaded"; there is no separate loaded flag.
    Overlapping ``load_users`` calls are not coordinated, the last one to finish
    wins.
    """

    client: JsonClient = field(default_factory=RequestsJsonClient)
    users_url: str = USERS_URL
    users: List[UserRecord] = field(default_factory=list)

    def load_users(self) -> None:
        try:
            body = self.client.get_json(self.users_url)
        except TransportError as exc:
            raise LoadError.from_cause(exc) from exc

        if not isinstance(body, list) or not all(isinstance(item, Mapping) for item in body):
            raise LoadError.from_cause("response body is not a list of user records")

        self.users = [UserRecord.from_dict(item) for item in body]

    def users_as_dicts(self) -> List[dict]:
        return [user.to_dict() for user in self.users]

    def get_number_of_users(self) -> int:
        users = self.users
        if not users:
            raise EmptyDataError()
        return len(users)

    def get_user_emails_list(self) -> str:
        users = self.users
        if not users:
            raise EmptyDataError()
        emails = (user.get("email") for user in users)
        return ";".join("" if email is None else str(email) for email in emails)

    def is_matching_all_search_params(
        self, record: Mapping[str, Any] | UserRecord, search_params: Mapping[str, Any]
    ) -> bool:
        for key, expected in search_params.items():
            if key not in record or not strict_equals(record[key], expected):
                return False
        return True

    def find_users(self, search_params: Optional[Mapping[str, Any]] = None) -> List[UserRecord]:
        if not search_params:
            raise InvalidArgumentError()

        users = self.users
        if not users:
            raise EmptyDataError()

        matches = [user for user in users if self.is_matching_all_search_params(user, search_params)]
        if not matches:
            raise NoMatchError()
        return matches
