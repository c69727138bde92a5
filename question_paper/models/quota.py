# question_paper/models/quota.py
"""Quota request model"""
from typing import Any, Hashable, NamedTuple


class QuotaRequest(NamedTuple):
    """Ask for `count` unique items from the bucket `key`, reported under `label`"""
    key: Hashable
    count: int
    label: str

    def to_dict(self) -> dict:
        """Convert to dictionary"""
        return {'key': self.key, 'count': self.count, 'label': self.label}

    @classmethod
    def from_value(cls, value: Any) -> 'QuotaRequest':
        """Accept a QuotaRequest, a (key, count, label) tuple or a dict"""
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(value['key'], value['count'], value['label'])
        key, count, label = value
        return cls(key, count, label)
