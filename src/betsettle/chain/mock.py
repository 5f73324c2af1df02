"""In-memory chain reader, optionally loaded from a JSON snapshot file.

File layout::

    {
      "platform_fee_bps": 200,
      "events": [{"id": "1", "status": "finished", "outcomes": {"yes": 60, "no": 40}, ...}],
      "bets": {"0xabc...": {"1": {"yes_amount": 10, "no_amount": 0, "claimed": false}}}
    }
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Sequence

from betsettle.chain.base import ChainReader
from betsettle.models.bet import UserBet
from betsettle.models.event import Event


def _address_key(address: str) -> str:
    return address.lower()


class MockChainReader(ChainReader):
    """Serves a fixed set of events and bets. Addresses are matched case-insensitively."""

    def __init__(
        self,
        events: Sequence[Event] | None = None,
        bets: dict[str, dict[str, UserBet]] | None = None,
        platform_fee_bps: int | None = None,
    ):
        self._events = list(events or [])
        self._bets = {_address_key(a): dict(by_event) for a, by_event in (bets or {}).items()}
        self._fee_bps = platform_fee_bps

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> MockChainReader:
        events = [Event.model_validate(e) for e in raw.get("events") or []]
        bets = {
            address: {str(eid): UserBet.model_validate(b) for eid, b in (by_event or {}).items()}
            for address, by_event in (raw.get("bets") or {}).items()
        }
        return cls(events=events, bets=bets, platform_fee_bps=raw.get("platform_fee_bps"))

    @classmethod
    def from_json(cls, path: str | Path) -> MockChainReader:
        with open(path, encoding="utf-8") as f:
            return cls.from_dict(json.load(f))

    def get_all_events(self) -> list[Event]:
        return list(self._events)

    def get_multiple_user_bets(self, event_ids: Sequence[str], user_address: str) -> list[UserBet | None]:
        by_event = self._bets.get(_address_key(user_address), {})
        return [by_event.get(eid) for eid in event_ids]

    def get_platform_fee(self) -> int | None:
        return self._fee_bps

    def get_known_users(self) -> list[str]:
        return list(self._bets)
